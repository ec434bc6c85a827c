"""List command handlers."""

from __future__ import annotations

import argparse

from rich.markup import escape

from aicowork.cli.common import make_console
from aicowork.contracts.status import ResourceKind
from aicowork.sdk import Cowork


def run_list(args: argparse.Namespace) -> int:
    console = make_console()
    cowork = Cowork.from_paths(source=args.source)
    kinds = [ResourceKind(args.type)] if args.type else list(ResourceKind)

    console.print("\n[bold]ai-cowork resources[/bold]\n")
    for kind in kinds:
        resources = cowork.list_resources(kind)
        if not resources:
            continue
        console.print(f"[cyan]{kind.value.capitalize()}[/cyan]")
        console.print("[dim]" + "─" * 40 + "[/dim]")
        for resource in resources:
            console.print(f"  {escape(resource.name)}")
            if resource.description:
                console.print(f"[dim]    {escape(resource.description)}[/dim]")
        console.print("")
    return 0


__all__ = ["run_list"]
