"""Shared CLI rendering helpers."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from aicowork.contracts.result import OperationResult, OutcomeKind

_MARKERS: dict[OutcomeKind, str] = {
    OutcomeKind.COPIED: "[green]  ✓[/green]",
    OutcomeKind.SKIPPED: "[yellow]  ⊘[/yellow]",
    OutcomeKind.FAILED: "[red]  ✗[/red]",
}


def make_console(*, stderr: bool = False) -> Console:
    return Console(stderr=stderr, soft_wrap=True, highlight=False)


def print_outcomes(console: Console, result: OperationResult) -> None:
    for outcome in result.outcomes:
        console.print(f"{_MARKERS[outcome.kind]} {escape(outcome.render())}")


def print_error(message: str) -> None:
    make_console(stderr=True).print(f"[red]error:[/red] {escape(message)}")


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"
