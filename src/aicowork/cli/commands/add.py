"""Add command handlers."""

from __future__ import annotations

import argparse

from aicowork.cli.common import make_console, print_outcomes
from aicowork.core.paths import resolve_config
from aicowork.sdk import Cowork


def run_add(args: argparse.Namespace) -> int:
    console = make_console()
    cowork = Cowork(resolve_config(args.dir, source=args.source))

    result = cowork.add(args.kind, args.name, force=args.force)
    print_outcomes(console, result)
    if result.errors:
        return 1
    return 0


__all__ = ["run_add"]
