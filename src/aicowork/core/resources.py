"""List template resources and add single stacks or skills to a project."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from aicowork.contracts.config import CoworkConfig
from aicowork.contracts.exceptions import NotInitializedError
from aicowork.contracts.result import OperationResult
from aicowork.contracts.status import Resource, ResourceKind
from aicowork.core.copier import copy_tree
from aicowork.core.detector import parse_stack
from aicowork.core.markdown import extract_summary
from aicowork.core.paths import directory_exists

logger = logging.getLogger(__name__)

ADDABLE_KINDS: tuple[str, ...] = ("stack", "skill")

_DOC_DIRS: dict[ResourceKind, tuple[str, ...]] = {
    ResourceKind.AGENTS: ("agents",),
    ResourceKind.WORKFLOWS: ("context", "core", "workflows"),
    ResourceKind.STANDARDS: ("context", "core", "standards"),
}


def _summary(path: Path) -> str:
    try:
        return extract_summary(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError):
        logger.debug("cannot read %s", path)
        return ""


def _stack_description(stack_dir: Path) -> str:
    stack_json = stack_dir / "stack.json"
    if not stack_json.is_file():
        return ""
    try:
        data = json.loads(stack_json.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        logger.debug("ignoring malformed %s", stack_json)
        return ""
    description = data.get("description") if isinstance(data, dict) else None
    return description if isinstance(description, str) else ""


def list_resources(source_dir: Path, kind: ResourceKind) -> list[Resource]:
    """Return the resources of *kind* available in the template tree, by name."""
    if kind is ResourceKind.STACKS:
        base = source_dir / "stacks"
        if not base.is_dir():
            return []
        return [
            Resource(name=entry.name, description=_stack_description(entry), path=entry)
            for entry in sorted(base.iterdir())
            if entry.is_dir()
        ]

    if kind is ResourceKind.SKILLS:
        base = source_dir / "skills"
        if not base.is_dir():
            return []
        resources = []
        for entry in sorted(base.iterdir()):
            if not entry.is_dir():
                continue
            skill_file = entry / "SKILL.md"
            description = _summary(skill_file) if skill_file.is_file() else ""
            resources.append(Resource(name=entry.name, description=description, path=skill_file))
        return resources

    base = source_dir.joinpath(*_DOC_DIRS[kind])
    if not base.is_dir():
        return []
    return [
        Resource(name=entry.stem, description=_summary(entry), path=entry)
        for entry in sorted(base.glob("*.md"))
        if entry.is_file()
    ]


def add_resource(config: CoworkConfig, kind: str, name: str, *, force: bool = False) -> OperationResult:
    """Copy one stack or skill from the template tree into an initialized project.

    Raises:
        NotInitializedError: The project has no ``.ai`` directory.
        InvalidStackError: *kind* is ``stack`` and *name* is not a known stack.
        ValueError: *kind* is neither ``stack`` nor ``skill``.
    """
    if kind not in ADDABLE_KINDS:
        raise ValueError(f"cannot add {kind!r}; expected one of: {', '.join(ADDABLE_KINDS)}")
    target_ai = config.project_ai_dir
    if not directory_exists(target_ai):
        raise NotInitializedError(config.project_dir)
    if kind == "stack":
        name = parse_stack(name)

    rel = Path(f"{kind}s") / name
    label = f".ai/{rel.as_posix()}"
    src = config.source_dir / rel
    dest = target_ai / rel

    result = OperationResult()
    if not directory_exists(src):
        result.add_failed(label, f"{kind} not found: {name}")
        return result
    if directory_exists(dest) and not force:
        result.add_skipped(label, "already exists, use --force to overwrite")
        return result
    try:
        copy_tree(src, dest, overwrite=force)
    except OSError as exc:
        result.fail(label, exc)
        return result
    result.add_copied(label)
    return result
