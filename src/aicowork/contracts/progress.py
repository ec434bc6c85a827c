"""Progress reporting protocol for update and sync runs.

An operation opens a phase, reports each directory or tool it finishes, and
closes the phase. Consumers (e.g. the CLI's Rich display) implement
``OperationProgress`` to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class OperationProgress(ABC):
    """Observer interface for operation progress events."""

    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None:
        """A phase is starting. *total* is ``None`` for indeterminate phases."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, phase: str, item: str) -> None:
        """*item* (an ``.ai`` directory label or a tool name) was handled."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        """The *phase* has finished."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        """The item currently being handled in *phase* failed with *error*."""
        ...  # pragma: no cover


class NullOperationProgress(OperationProgress):
    """No-op implementation used when no progress display is requested."""

    def phase_start(self, phase: str, total: int | None = None) -> None:
        pass

    def item_done(self, phase: str, item: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
