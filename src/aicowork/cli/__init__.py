"""Command-line interface for ai-cowork."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from aicowork.cli.app import main as main
from aicowork.cli.commands.add import run_add
from aicowork.cli.commands.init import run_init
from aicowork.cli.commands.list import run_list
from aicowork.cli.commands.sync import run_sync
from aicowork.cli.commands.update import run_update
from aicowork.cli.commands.upgrade import run_status, run_upgrade
from aicowork.cli.parser import build_parser as build_parser

COMMANDS: dict[str, Callable[[argparse.Namespace], int]] = {
    "init": run_init,
    "list": run_list,
    "update": run_update,
    "add": run_add,
    "sync": run_sync,
    "upgrade": run_upgrade,
    "status": run_status,
}
