"""Rich progress display for ``update`` and ``sync all``."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import TracebackType
from typing import ClassVar

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TaskID, TextColumn

from aicowork.contracts.progress import OperationProgress


@dataclass
class _PhaseState:
    task_id: TaskID
    done: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    error: BaseException | None = None


class RichOperationProgress(OperationProgress):
    """One bar per phase, naming the ``.ai`` directory or tool last handled.

    When a phase finishes the trailing column turns into a tally of handled
    and failed items::

        with RichOperationProgress() as progress:
            Cowork(config, progress=progress).sync("all")
    """

    _PHASE_TITLES: ClassVar[dict[str, str]] = {
        "Update": "Updating .ai",
        "Sync": "Syncing tools",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("[bold]{task.description}"),
            BarColumn(bar_width=24),
            MofNCompleteColumn(),
            TextColumn("{task.fields[item]}"),
            console=self._console,
        )
        self._phases: dict[str, _PhaseState] = {}

    def __enter__(self) -> RichOperationProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def phase_start(self, phase: str, total: int | None = None) -> None:
        title = self._PHASE_TITLES.get(phase, phase)
        task_id = self._progress.add_task(title, total=total, item="")
        self._phases[phase] = _PhaseState(task_id=task_id)

    def item_done(self, phase: str, item: str) -> None:
        state = self._phases.get(phase)
        if state is None:
            return
        if state.error is not None:
            state.failed.append(item)
            state.error = None
            text = f"[red]✗ {escape(item)}[/red]"
        else:
            state.done.append(item)
            text = escape(item)
        self._progress.update(state.task_id, advance=1, item=text)

    def phase_done(self, phase: str) -> None:
        state = self._phases.get(phase)
        if state is None:
            return
        handled = len(state.done) + len(state.failed)
        total = max(handled, 1)
        tally = f"{len(state.done)} done"
        if state.failed:
            tally += f", [red]{len(state.failed)} failed: {escape(', '.join(state.failed))}[/red]"
        self._progress.update(state.task_id, total=total, completed=total, item=tally)

    def phase_error(self, phase: str, error: BaseException) -> None:
        state = self._phases.get(phase)
        if state is None:
            return
        state.error = error
        title = self._PHASE_TITLES.get(phase, phase)
        self._progress.update(state.task_id, description=f"[red]{escape(title)}[/red]")
