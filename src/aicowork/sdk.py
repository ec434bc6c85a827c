"""SDK composition root for ai-cowork.

``Cowork`` binds one explicit :class:`CoworkConfig` to every operation so
callers never re-derive the working directory or install location.
"""

from __future__ import annotations

from pathlib import Path

from aicowork.contracts.config import CoworkConfig
from aicowork.contracts.progress import NullOperationProgress, OperationProgress
from aicowork.contracts.result import OperationResult
from aicowork.contracts.stack import DetectionResult, Stack
from aicowork.contracts.status import InstallationStatus, Resource, ResourceKind
from aicowork.contracts.sync import SyncResult
from aicowork.contracts.tools import ToolSelection
from aicowork.core import copier, detector, resources, updater, upgrade
from aicowork.core.paths import require_source_dir, resolve_config
from aicowork.sync import sync_all, sync_tool


class Cowork:
    def __init__(self, config: CoworkConfig, *, progress: OperationProgress | None = None) -> None:
        self._config = config
        self._progress = progress or NullOperationProgress()

    @classmethod
    def from_paths(cls, project_dir: str | Path = ".", *, source: str | Path | None = None) -> Cowork:
        return cls(resolve_config(project_dir, source=source))

    @property
    def config(self) -> CoworkConfig:
        return self._config

    def detect(self) -> DetectionResult:
        return detector.detect_stack(self._config.project_dir)

    def install(
        self,
        *,
        stack: Stack | None = None,
        skip_stacks: bool = False,
        overwrite: bool = False,
    ) -> OperationResult:
        source_dir = require_source_dir(self._config)
        return copier.copy_templates(
            source_dir,
            self._config.project_dir,
            stack=stack,
            skip_stacks=skip_stacks,
            overwrite=overwrite,
        )

    def create_bridges(self, tools: ToolSelection = "all") -> OperationResult:
        return copier.create_bridges(self._config.project_dir, tools)

    def update(self, *, stack: str | None = None, force: bool = False) -> OperationResult:
        require_source_dir(self._config)
        parsed = detector.parse_stack(stack) if stack is not None else None
        return updater.update_installation(self._config, stack=parsed, force=force, progress=self._progress)

    def add(self, kind: str, name: str, *, force: bool = False) -> OperationResult:
        require_source_dir(self._config)
        return resources.add_resource(self._config, kind, name, force=force)

    def sync(self, tool: str) -> list[SyncResult]:
        if tool == "all":
            return sync_all(self._config, progress=self._progress)
        return [sync_tool(self._config, tool)]

    def upgrade(self, *, force: bool = False) -> OperationResult:
        require_source_dir(self._config)
        return upgrade.upgrade_to_v2(self._config, force=force)

    def status(self) -> InstallationStatus:
        return upgrade.inspect_status(self._config.project_dir)

    def list_resources(self, kind: ResourceKind) -> list[Resource]:
        return resources.list_resources(require_source_dir(self._config), kind)
