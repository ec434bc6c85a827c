"""Sync the ``.ai`` tree into external AI tool layouts."""

from __future__ import annotations

import logging
from pathlib import Path

from aicowork.contracts.config import CoworkConfig
from aicowork.contracts.progress import NullOperationProgress, OperationProgress
from aicowork.contracts.sync import SyncResult
from aicowork.core.paths import directory_exists, require_source_dir
from aicowork.sync.targets import available_targets, create_target

logger = logging.getLogger(__name__)


def resolve_input_dir(config: CoworkConfig) -> Path:
    """Prefer the project's own ``.ai`` tree, falling back to the bundled one."""
    if directory_exists(config.project_ai_dir):
        return config.project_ai_dir
    logger.debug("no .ai in %s; syncing from %s", config.project_dir, config.source_dir)
    return require_source_dir(config)


def sync_tool(config: CoworkConfig, tool: str) -> SyncResult:
    target = create_target(tool)
    return target.sync(resolve_input_dir(config), config.project_dir)


def sync_all(config: CoworkConfig, *, progress: OperationProgress | None = None) -> list[SyncResult]:
    progress = progress or NullOperationProgress()
    tools = available_targets()
    results: list[SyncResult] = []
    progress.phase_start("Sync", total=len(tools))
    for tool in tools:
        try:
            results.append(sync_tool(config, tool))
        except Exception as exc:
            progress.phase_error("Sync", exc)
            raise
        progress.item_done("Sync", tool)
    progress.phase_done("Sync")
    return results


__all__ = ["resolve_input_dir", "sync_all", "sync_tool"]
