"""Registry of sync targets keyed by tool.

Decouples target selection from target implementation: callers create
targets by tool name without importing the concrete classes.
"""

from __future__ import annotations

from aicowork.contracts.exceptions import UnknownToolError
from aicowork.contracts.sync import SyncTarget
from aicowork.contracts.tools import AITool
from aicowork.sync.targets.claude import ClaudeTarget
from aicowork.sync.targets.opencode import OpenCodeTarget

_REGISTRY: dict[AITool, type[SyncTarget]] = {}


def register(tool: AITool, target_cls: type[SyncTarget]) -> None:
    _REGISTRY[tool] = target_cls


def available_targets() -> list[AITool]:
    """Registered tools in sync order."""
    return list(_REGISTRY)


def create_target(name: str) -> SyncTarget:
    """Create the sync target for *name*.

    Raises:
        UnknownToolError: If no target is registered for *name*.
    """
    try:
        tool = AITool(name)
        target_cls = _REGISTRY[tool]
    except (ValueError, KeyError):
        raise UnknownToolError(name) from None
    return target_cls()


register(AITool.OPENCODE, OpenCodeTarget)
register(AITool.CLAUDE, ClaudeTarget)

__all__ = ["ClaudeTarget", "OpenCodeTarget", "available_targets", "create_target", "register"]
