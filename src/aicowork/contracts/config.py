"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class CoworkConfig(BaseModel):
    """Explicit locations every component works against.

    ``source_dir`` is the bundled template tree (the ``.ai`` directory shipped
    with the tool); ``project_dir`` is the root of the user's project.
    """

    model_config = ConfigDict(frozen=True)

    source_dir: Path
    project_dir: Path

    @property
    def project_ai_dir(self) -> Path:
        return self.project_dir / ".ai"
