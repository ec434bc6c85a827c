"""Sync target contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel, Field

from aicowork.contracts.tools import AITool


class SyncResult(BaseModel):
    tool: AITool
    input_dir: Path
    counts: dict[str, int] = Field(default_factory=dict)
    written: list[Path] = Field(default_factory=list)
    commands_generated: bool = False

    def record(self, category: str, paths: list[Path]) -> None:
        self.counts[category] = self.counts.get(category, 0) + len(paths)
        self.written.extend(paths)


class SyncTarget(ABC):
    """One external tool's on-disk layout, produced from an ``.ai`` tree."""

    tool: AITool

    @abstractmethod
    def sync(self, ai_dir: Path, project_dir: Path) -> SyncResult:
        """Convert *ai_dir* into this tool's layout under *project_dir*."""
        ...  # pragma: no cover
