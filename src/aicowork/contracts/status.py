"""Installation status and resource listing contracts."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field


class InstallationStatus(BaseModel):
    project_dir: Path
    initialized: bool
    entries: dict[str, bool] = Field(default_factory=dict)

    @property
    def is_v2(self) -> bool:
        return all(self.entries.get(name, False) for name in ("CONTEXT.md", "config.json", "rules/"))


class ResourceKind(StrEnum):
    STACKS = "stacks"
    SKILLS = "skills"
    AGENTS = "agents"
    WORKFLOWS = "workflows"
    STANDARDS = "standards"


class Resource(BaseModel):
    name: str
    description: str = ""
    path: Path
