"""Per-item outcome contracts for copy, bridge, update and upgrade operations."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class OutcomeKind(StrEnum):
    COPIED = "copied"
    SKIPPED = "skipped"
    FAILED = "failed"


class Outcome(BaseModel):
    kind: OutcomeKind
    label: str
    detail: str | None = None
    count: int | None = None

    def render(self) -> str:
        if self.detail is None:
            return self.label
        if self.kind is OutcomeKind.FAILED:
            return f"{self.label}: {self.detail}"
        return f"{self.label} ({self.detail})"


class OperationResult(BaseModel):
    """Ordered outcomes of one operation.

    ``success`` turns false only through :meth:`fail`, i.e. when an unexpected
    exception interrupted the operation. Skips and expected errors are plain
    outcomes and leave it untouched.
    """

    success: bool = True
    outcomes: list[Outcome] = Field(default_factory=list)

    def add_copied(self, label: str, detail: str | None = None, *, count: int | None = None) -> None:
        self.outcomes.append(Outcome(kind=OutcomeKind.COPIED, label=label, detail=detail, count=count))

    def add_skipped(self, label: str, detail: str | None = None) -> None:
        self.outcomes.append(Outcome(kind=OutcomeKind.SKIPPED, label=label, detail=detail))

    def add_failed(self, label: str, detail: str | None = None) -> None:
        self.outcomes.append(Outcome(kind=OutcomeKind.FAILED, label=label, detail=detail))

    def fail(self, label: str, error: BaseException) -> None:
        self.success = False
        self.add_failed(label, str(error) or type(error).__name__)

    def _rendered(self, kind: OutcomeKind) -> list[str]:
        return [outcome.render() for outcome in self.outcomes if outcome.kind is kind]

    @property
    def copied_count(self) -> int:
        """Total of the per-outcome counts of copied items."""
        return sum(outcome.count or 0 for outcome in self.outcomes if outcome.kind is OutcomeKind.COPIED)

    @property
    def copied(self) -> list[str]:
        return self._rendered(OutcomeKind.COPIED)

    @property
    def skipped(self) -> list[str]:
        return self._rendered(OutcomeKind.SKIPPED)

    @property
    def errors(self) -> list[str]:
        return self._rendered(OutcomeKind.FAILED)
