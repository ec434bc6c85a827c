"""AI tool bridge contracts."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal


class AITool(StrEnum):
    CLAUDE = "claude"
    CURSOR = "cursor"
    OPENCODE = "opencode"
    AGENT = "agent"


ToolSelection = list[AITool] | Literal["all"]

AI_BRIDGES: dict[AITool, str] = {
    AITool.CLAUDE: ".claude",
    AITool.CURSOR: ".cursor",
    AITool.OPENCODE: ".opencode",
    AITool.AGENT: ".agent",
}

BRIDGE_CONFIG_FILES: dict[AITool, str] = {
    AITool.CLAUDE: "CLAUDE.md",
    AITool.CURSOR: "rules.md",
    AITool.OPENCODE: "config.md",
    AITool.AGENT: "AGENT.md",
}

TOOL_LABELS: dict[AITool, str] = {
    AITool.CLAUDE: "Claude Code",
    AITool.CURSOR: "Cursor",
    AITool.OPENCODE: "OpenCode",
    AITool.AGENT: "AI Agent",
}
