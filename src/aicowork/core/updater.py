"""Timestamp-based refresh of an installed ``.ai`` tree."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from aicowork.contracts.config import CoworkConfig
from aicowork.contracts.exceptions import NotInitializedError
from aicowork.contracts.progress import NullOperationProgress, OperationProgress
from aicowork.contracts.result import OperationResult
from aicowork.contracts.stack import Stack
from aicowork.core.paths import directory_exists

logger = logging.getLogger(__name__)

UPDATE_DIRS: tuple[str, ...] = ("context", "skills", "agents")


def get_updates(source_dir: Path, dest_dir: Path) -> list[str]:
    """List files under *source_dir* that are missing or stale in *dest_dir*.

    Paths are POSIX-style and relative to *source_dir*. A file is stale only
    when its source modification time is strictly newer than the
    destination's, so equal timestamps never trigger a copy.
    """
    updates: list[str] = []

    def scan(relative: Path) -> None:
        for entry in sorted((source_dir / relative).iterdir(), key=lambda p: (not p.is_dir(), p.name)):
            rel_path = relative / entry.name
            if entry.is_dir():
                scan(rel_path)
                continue
            if not entry.is_file():
                continue
            dest_file = dest_dir / rel_path
            if not dest_file.exists():
                updates.append(rel_path.as_posix())
            elif entry.stat().st_mtime > dest_file.stat().st_mtime:
                updates.append(rel_path.as_posix())

    scan(Path())
    return updates


def list_files(source_dir: Path) -> list[str]:
    """Every file under *source_dir*, as POSIX paths relative to it."""
    return sorted(path.relative_to(source_dir).as_posix() for path in source_dir.rglob("*") if path.is_file())


def apply_updates(source_dir: Path, dest_dir: Path, paths: list[str]) -> int:
    """Copy each relative path from *source_dir* to *dest_dir*, overwriting.

    Modification times are preserved, so an immediate second scan finds
    nothing to update.
    """
    for rel_path in paths:
        dest_file = dest_dir / rel_path
        dest_file.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source_dir / rel_path, dest_file)
        logger.debug("updated %s", dest_file)
    return len(paths)


def update_installation(
    config: CoworkConfig,
    *,
    stack: Stack | None = None,
    force: bool = False,
    progress: OperationProgress | None = None,
) -> OperationResult:
    """Refresh the installed core directories (and optionally one stack).

    Only missing or stale files are copied unless *force* is set, in which
    case every source file overwrites its installed copy.
    """
    progress = progress or NullOperationProgress()
    target_ai = config.project_ai_dir
    if not directory_exists(target_ai):
        raise NotInitializedError(config.project_dir)

    names = list(UPDATE_DIRS)
    if stack is not None:
        names.append(f"stacks/{stack}")

    result = OperationResult()
    progress.phase_start("Update", total=len(names))
    for name in names:
        src = config.source_dir / name
        dest = target_ai / name
        label = f".ai/{name}"
        try:
            if not directory_exists(src):
                result.add_skipped(label, "source not found")
                continue
            updates = list_files(src) if force else get_updates(src, dest)
            if not updates:
                result.add_skipped(label, "already up to date")
                continue
            count = apply_updates(src, dest, updates)
            result.add_copied(label, f"{count} file{'s' if count != 1 else ''}", count=count)
        except OSError as exc:
            progress.phase_error("Update", exc)
            result.fail(label, exc)
        finally:
            progress.item_done("Update", label)
    progress.phase_done("Update")
    return result
