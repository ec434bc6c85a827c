"""Upgrade and status command handlers."""

from __future__ import annotations

import argparse

from rich.markup import escape

from aicowork.cli.common import make_console, print_outcomes
from aicowork.contracts.status import InstallationStatus
from aicowork.core.paths import resolve_config
from aicowork.sdk import Cowork

_ENTRY_DESCRIPTIONS: dict[str, str] = {
    "CONTEXT.md": "entry point",
    "config.json": "configuration",
    "rules/": "conditional rules",
    "commands/": "slash commands",
    "context/": "standards & workflows",
    "skills/": "reusable skills",
    "agents/": "AI agents",
    "stacks/": "tech stack configs",
}


def run_upgrade(args: argparse.Namespace) -> int:
    console = make_console()
    cowork = Cowork(resolve_config(args.dir, source=args.source))

    console.print("\n[bold]Upgrading to ai-cowork v2 structure[/bold]\n")
    result = cowork.upgrade(force=args.force)
    print_outcomes(console, result)

    console.print("\n[bold]Upgrade complete![/bold]\n")
    console.print("New v2 features:")
    console.print("  • .ai/CONTEXT.md - Main entry point (always loaded)")
    console.print("  • .ai/config.json - Unified configuration")
    console.print("  • .ai/rules/ - Conditional rules (auto-applied by file type)")
    console.print("  • .ai/commands/ - Custom slash commands")
    console.print("\nRun `ai-cowork sync all` to update tool-specific configs.\n")
    return 0 if result.success else 1


def format_status(status: InstallationStatus) -> list[str]:
    if not status.initialized:
        return ["✗ No .ai/ directory found", "  Run `ai-cowork init` to set up"]

    lines = [f"Version: {'v2 (Smart Loading)' if status.is_v2 else 'v1 (Legacy)'}", "", "Structure:"]
    for name, present in status.entries.items():
        description = _ENTRY_DESCRIPTIONS.get(name, "")
        lines.append(f"  {'✓' if present else '✗'} {name} ({description})")
    if not status.is_v2:
        lines.extend(["", "Upgrade to v2 for smart context loading:", "  ai-cowork upgrade"])
    return lines


def run_status(args: argparse.Namespace) -> int:
    console = make_console()
    cowork = Cowork(resolve_config(args.dir, source=args.source))

    console.print("\n[bold]ai-cowork status[/bold]\n")
    for line in format_status(cowork.status()):
        console.print(escape(line))
    console.print("")
    return 0


__all__ = ["format_status", "run_status", "run_upgrade"]
