"""Copy the template tree into a project and create AI tool bridges."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from aicowork.contracts.exceptions import UnknownToolError
from aicowork.contracts.result import OperationResult
from aicowork.contracts.stack import Stack
from aicowork.contracts.tools import AI_BRIDGES, BRIDGE_CONFIG_FILES, AITool, ToolSelection
from aicowork.core.bridges import render_bridge_config, render_bridge_readme
from aicowork.core.paths import directory_exists, file_exists

logger = logging.getLogger(__name__)

CORE_DIRS: tuple[str, ...] = ("context", "skills", "agents", "templates")
V2_DIRS: tuple[str, ...] = ("rules", "commands")
V2_FILES: tuple[str, ...] = ("CONTEXT.md", "config.json")


def copy_tree(src: Path, dest: Path, *, overwrite: bool) -> None:
    """Recursively copy *src* into *dest*, merging with what is already there.

    Existing destination files are replaced only when *overwrite* is set.
    """

    def _copy(src_file: str, dest_file: str) -> str:
        if not overwrite and Path(dest_file).exists():
            logger.debug("keeping existing %s", dest_file)
            return dest_file
        return shutil.copy2(src_file, dest_file)

    shutil.copytree(src, dest, copy_function=_copy, dirs_exist_ok=True)


def copy_templates(
    source_dir: Path,
    project_dir: Path,
    *,
    stack: Stack | None = None,
    skip_stacks: bool = False,
    overwrite: bool = False,
) -> OperationResult:
    """Install the template tree under ``<project_dir>/.ai``.

    An existing ``.ai`` directory marks the project as already initialized:
    unless *overwrite* is set, nothing is copied. Partial copies are not
    rolled back when an I/O error interrupts the operation.
    """
    result = OperationResult()
    target_ai = project_dir / ".ai"

    if directory_exists(target_ai) and not overwrite:
        result.add_skipped(".ai", "already exists, use --force to overwrite")
        return result

    try:
        for name in (*CORE_DIRS, *V2_DIRS):
            src = source_dir / name
            if directory_exists(src):
                copy_tree(src, target_ai / name, overwrite=overwrite)
                result.add_copied(f".ai/{name}")

        for name in V2_FILES:
            src = source_dir / name
            dest = target_ai / name
            if file_exists(src) and (overwrite or not dest.exists()):
                dest.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(src, dest)
                result.add_copied(f".ai/{name}")

        if skip_stacks:
            result.add_skipped(".ai/stacks", "skipped - no stack selected")
        elif stack is not None:
            stack_src = source_dir / "stacks" / stack
            if directory_exists(stack_src):
                copy_tree(stack_src, target_ai / "stacks" / stack, overwrite=overwrite)
                result.add_copied(f".ai/stacks/{stack}")
            else:
                result.add_failed(f".ai/stacks/{stack}", f"stack not found: {stack}")
        else:
            stacks_src = source_dir / "stacks"
            if directory_exists(stacks_src):
                copy_tree(stacks_src, target_ai / "stacks", overwrite=overwrite)
                result.add_copied(".ai/stacks", "all")
    except OSError as exc:
        logger.debug("template copy interrupted", exc_info=True)
        result.fail(".ai", exc)

    return result


def parse_tools(value: str | None) -> ToolSelection:
    """Turn a comma-separated ``--ai`` value into a tool selection.

    Unknown names are dropped; when nothing valid remains the selection
    falls back to every tool.
    """
    if value is None or value.strip() in ("", "all"):
        return "all"
    selected: list[AITool] = []
    for raw in value.split(","):
        name = raw.strip()
        if not name:
            continue
        try:
            tool = AITool(name)
        except ValueError:
            logger.warning("ignoring unknown AI tool: %s", name)
            continue
        if tool not in selected:
            selected.append(tool)
    return selected or "all"


def _as_tool(name: str) -> AITool:
    try:
        return AITool(name)
    except ValueError:
        raise UnknownToolError(name) from None


def create_bridges(project_dir: Path, tools: ToolSelection = "all") -> OperationResult:
    """Create one bridge directory per requested tool.

    Each tool is handled independently: an error for one is recorded and the
    remaining tools are still processed.
    """
    result = OperationResult()
    selected = list(AITool) if tools == "all" else [_as_tool(tool) for tool in tools]

    for tool in selected:
        bridge_name = AI_BRIDGES[tool]
        bridge_path = project_dir / bridge_name
        if directory_exists(bridge_path):
            result.add_skipped(bridge_name, "already exists")
            continue
        try:
            bridge_path.mkdir(parents=True, exist_ok=True)
            (bridge_path / "README.md").write_text(render_bridge_readme(tool), encoding="utf-8")
            (bridge_path / BRIDGE_CONFIG_FILES[tool]).write_text(render_bridge_config(tool), encoding="utf-8")
        except OSError as exc:
            result.add_failed(bridge_name, f"failed to create bridge: {exc}")
            continue
        result.add_copied(bridge_name)

    return result
