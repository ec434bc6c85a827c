"""Upgrade a legacy ``.ai`` layout to v2 and report installation status."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from aicowork.contracts.config import CoworkConfig
from aicowork.contracts.exceptions import NotInitializedError
from aicowork.contracts.result import OperationResult
from aicowork.contracts.status import InstallationStatus
from aicowork.core.paths import directory_exists, file_exists

logger = logging.getLogger(__name__)

GITIGNORE_PATTERN = "CONTEXT.local.md"

# (name, is_directory) in report order.
STATUS_ENTRIES: tuple[tuple[str, bool], ...] = (
    ("CONTEXT.md", False),
    ("config.json", False),
    ("rules", True),
    ("commands", True),
    ("context", True),
    ("skills", True),
    ("agents", True),
    ("stacks", True),
)


def _copy_file(source: Path, dest: Path, *, force: bool) -> bool:
    if not file_exists(source):
        return False
    if dest.exists() and not force:
        return False
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, dest)
    return True


def _upgrade_file(result: OperationResult, source_ai: Path, target_ai: Path, name: str, *, force: bool) -> None:
    label = f".ai/{name}"
    if (target_ai / name).exists() and not force:
        result.add_skipped(label, "already exists")
    elif _copy_file(source_ai / name, target_ai / name, force=force):
        result.add_copied(label)


def _upgrade_dir(result: OperationResult, source_ai: Path, target_ai: Path, name: str, *, force: bool) -> None:
    source_dir = source_ai / name
    if not directory_exists(source_dir):
        return
    target_dir = target_ai / name
    target_dir.mkdir(parents=True, exist_ok=True)

    copied = 0
    for source in sorted(source_dir.glob("*.md")):
        if _copy_file(source, target_dir / source.name, force=force):
            copied += 1
    label = f".ai/{name}"
    if copied:
        result.add_copied(label, f"{copied} file{'s' if copied != 1 else ''}", count=copied)
    else:
        result.add_skipped(label, "already up to date")


def _ensure_gitignore(result: OperationResult, project_dir: Path) -> None:
    gitignore = project_dir / ".gitignore"
    if not file_exists(gitignore):
        return
    try:
        content = gitignore.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.debug("leaving %s alone: not UTF-8", gitignore)
        result.add_skipped(".gitignore", "not UTF-8 text")
        return
    if GITIGNORE_PATTERN in content:
        return
    with gitignore.open("a", encoding="utf-8") as handle:
        handle.write(f"\n# ai-cowork local context\n{GITIGNORE_PATTERN}\n")
    result.add_copied(".gitignore", f"added {GITIGNORE_PATTERN}")


def upgrade_to_v2(config: CoworkConfig, *, force: bool = False) -> OperationResult:
    """Add the v2 entry point, configuration, rules and commands to a project.

    Files the project already has are kept unless *force* is set.
    """
    target_ai = config.project_ai_dir
    if not directory_exists(target_ai):
        raise NotInitializedError(config.project_dir)

    result = OperationResult()
    try:
        for name in ("CONTEXT.md", "config.json"):
            _upgrade_file(result, config.source_dir, target_ai, name, force=force)
        for name in ("rules", "commands"):
            _upgrade_dir(result, config.source_dir, target_ai, name, force=force)
        _ensure_gitignore(result, config.project_dir)
    except OSError as exc:
        logger.debug("upgrade interrupted", exc_info=True)
        result.fail(".ai", exc)
    return result


def inspect_status(project_dir: Path) -> InstallationStatus:
    target_ai = project_dir / ".ai"
    if not directory_exists(target_ai):
        return InstallationStatus(project_dir=project_dir, initialized=False)

    entries: dict[str, bool] = {}
    for name, is_dir in STATUS_ENTRIES:
        path = target_ai / name
        if is_dir:
            entries[f"{name}/"] = directory_exists(path)
        else:
            entries[name] = file_exists(path)
    return InstallationStatus(project_dir=project_dir, initialized=True, entries=entries)
