"""Sync command formatting."""

from __future__ import annotations

import argparse

from aicowork.cli.common import make_console, plural
from aicowork.cli.progress.rich import RichOperationProgress
from aicowork.contracts.sync import SyncResult
from aicowork.contracts.tools import AI_BRIDGES
from aicowork.core.paths import resolve_config
from aicowork.sdk import Cowork

_CATEGORY_LABELS: dict[str, tuple[str, str]] = {
    "skills": ("Skills:", "skill"),
    "agents": ("Agents:", "agent"),
    "rules": ("Rules:", "rule"),
    "commands": ("Commands:", "command"),
    "plugins": ("Plugins:", "plugin"),
}


def format_sync_summary(result: SyncResult) -> str:
    bridge = AI_BRIDGES[result.tool]
    lines = [
        "",
        f"ai-cowork - sync complete ({result.tool})",
        "",
        f"  Input:     {result.input_dir}",
        f"  Output:    {bridge}/",
        "",
    ]
    for category, (label, noun) in _CATEGORY_LABELS.items():
        if category not in result.counts:
            continue
        line = f"  {label:<10} {plural(result.counts[category], noun)}"
        if category == "commands" and result.commands_generated:
            line += " (generated from skills)"
        lines.append(line)

    if result.counts.get("config"):
        lines.append("  Config:    opencode.json")
    if result.counts.get("entry_point"):
        entry = "AGENTS.md" if result.tool == "opencode" else "CLAUDE.md"
        lines.append(f"  Entry:     {entry}")
    else:
        lines.append("  Entry:     kept existing file")

    lines.append("")
    return "\n".join(lines)


def run_sync(args: argparse.Namespace) -> int:
    config = resolve_config(args.dir, source=args.source)

    if not args.verbose and args.tool == "all":
        with RichOperationProgress() as progress:
            results = Cowork(config, progress=progress).sync(args.tool)
    else:
        results = Cowork(config).sync(args.tool)

    console = make_console()
    for result in results:
        console.print(format_sync_summary(result), markup=False)
    return 0


__all__ = ["format_sync_summary", "run_sync"]
