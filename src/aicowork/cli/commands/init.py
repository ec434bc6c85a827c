"""Init command handlers."""

from __future__ import annotations

import argparse

from rich.markup import escape

from aicowork.cli.common import make_console, print_outcomes
from aicowork.contracts.stack import AVAILABLE_STACKS, Stack
from aicowork.core.copier import parse_tools
from aicowork.core.detector import is_valid_stack
from aicowork.core.paths import resolve_config
from aicowork.sdk import Cowork

NO_STACK = "none"


def select_stack() -> Stack | None:
    """Ask which stack to install; ``None`` means core files only.

    Raises:
        KeyboardInterrupt: The prompt was cancelled.
    """
    import questionary

    choices = [questionary.Choice(stack, value=stack) for stack in AVAILABLE_STACKS]
    choices.append(questionary.Choice("none (core only, no stack-specific files)", value=NO_STACK))
    selected = questionary.select("Select stack:", choices=choices, default=NO_STACK).ask()
    if selected is None:
        raise KeyboardInterrupt
    return None if selected == NO_STACK else Stack(selected)


def run_init(args: argparse.Namespace) -> int:
    console = make_console()
    config = resolve_config(args.dir, source=args.source)
    cowork = Cowork(config)

    console.print("\n[bold]Initializing ai-cowork[/bold]\n")
    console.print(f"[dim]  Target: {escape(str(config.project_dir))}[/dim]")
    console.print(f"[dim]  Source: {escape(str(config.source_dir))}[/dim]\n")

    stack: Stack | None = None
    skip_stacks = False

    if args.stack:
        if args.stack == NO_STACK:
            skip_stacks = True
            console.print("[green]✓[/green] Skipping stack-specific files (core only)")
        elif is_valid_stack(args.stack):
            stack = Stack(args.stack)
            console.print(f"[green]✓[/green] Using specified stack: [cyan]{stack}[/cyan]")
        else:
            console.print(f"[red]✗[/red] Invalid stack: {escape(args.stack)}")
            console.print(f"[yellow]  Available stacks: {', '.join(AVAILABLE_STACKS)}, {NO_STACK}[/yellow]")
            return 2
    else:
        detection = cowork.detect()
        if detection.stack is not None:
            stack = detection.stack
            console.print(
                f"[green]✓[/green] Detected stack: [cyan]{stack}[/cyan] ({detection.confidence} confidence)"
            )
            console.print(f"[dim]  Reason: {escape(detection.reason)}[/dim]")
        else:
            console.print("[yellow]![/yellow] Could not detect stack automatically")
            if args.yes:
                skip_stacks = True
                console.print("[dim]  Using --yes flag, skipping stack-specific files[/dim]")
            else:
                try:
                    stack = select_stack()
                except KeyboardInterrupt:
                    console.print("\nAborted.")
                    return 2
                if stack is None:
                    skip_stacks = True
                    console.print("[dim]  Skipping stack-specific files[/dim]")
                else:
                    console.print(f"[green]  Selected stack: [cyan]{stack}[/cyan][/green]")

    copy_result = cowork.install(stack=stack, skip_stacks=skip_stacks, overwrite=args.force)
    console.print("\n[bold]Copying .ai directory[/bold]")
    print_outcomes(console, copy_result)

    success = copy_result.success
    if args.bridge:
        bridge_result = cowork.create_bridges(parse_tools(args.ai))
        console.print("\n[bold]Creating AI tool bridges[/bold]")
        print_outcomes(console, bridge_result)
        success = success and not bridge_result.errors

    console.print("\n[bold]Initialization complete![/bold]\n")
    console.print("[dim]Next steps:[/dim]")
    console.print("[dim]  1. Review .ai/context/index.md for context loading rules[/dim]")
    console.print("[dim]  2. Configure your AI tool to use the bridge directory[/dim]")
    if stack is not None:
        console.print(f"[dim]  3. Stack-specific standards: .ai/stacks/{stack}/[/dim]")
    console.print("")
    return 0 if success else 1


__all__ = ["run_init", "select_stack"]
