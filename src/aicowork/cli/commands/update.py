"""Update command handlers."""

from __future__ import annotations

import argparse

from aicowork.cli.common import make_console, plural, print_outcomes
from aicowork.cli.progress.rich import RichOperationProgress
from aicowork.core.paths import resolve_config
from aicowork.sdk import Cowork


def run_update(args: argparse.Namespace) -> int:
    console = make_console()
    config = resolve_config(args.dir, source=args.source)

    console.print("\n[bold]Updating ai-cowork[/bold]\n")
    if not args.verbose:
        with RichOperationProgress() as progress:
            result = Cowork(config, progress=progress).update(stack=args.stack, force=args.force)
    else:
        result = Cowork(config).update(stack=args.stack, force=args.force)

    print_outcomes(console, result)
    console.print("")
    if result.copied_count:
        console.print(f"[green]Updated {plural(result.copied_count, 'file')}[/green]")
    else:
        console.print("[dim]Everything is up to date![/dim]")
    console.print("")
    return 0 if result.success else 1


__all__ = ["run_update"]
