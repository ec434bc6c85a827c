"""Generated README and config stub bodies for AI tool bridge directories."""

from __future__ import annotations

from aicowork.contracts.tools import TOOL_LABELS, AITool

_CLAUDE_CONFIG = """\
# Claude Code Configuration

## Context Loading

Before starting any task, consult `.ai/context/index.md` for the appropriate context to load.

## Available Resources

- Standards: `.ai/context/core/standards/`
- Workflows: `.ai/context/core/workflows/`
- Skills: `.ai/skills/`
- Stacks: `.ai/stacks/`
"""

_CURSOR_CONFIG = """\
# Cursor Rules

## Context Loading

Check `.ai/context/index.md` for routing table.
Load only the relevant context files for the current task.

## Stack Detection

- React/TypeScript: Check package.json for react
- Laravel: Check composer.json for laravel/framework
- Express: Check package.json for express
"""

_OPENCODE_CONFIG = """\
# OpenCode Configuration

## Agent Prompt Addition

Add to your agent prompt:

```
<context_loading>
Before executing tasks:
1. Read .ai/context/index.md for routing
2. Load ONLY files matching current task
3. Detect stack from project files before loading stack-specific content
4. Never load more than 3 context files at once
</context_loading>
```
"""

_AGENT_CONFIG = """\
# AI Agent Integration

## Context System

This project uses ai-cowork for AI-assisted development.

## Loading Rules

1. Start with `.ai/context/index.md`
2. Load task-specific standards
3. Load stack-specific files when detected
4. Use skills for specific actions
"""

_CONFIG_BODIES: dict[AITool, str] = {
    AITool.CLAUDE: _CLAUDE_CONFIG,
    AITool.CURSOR: _CURSOR_CONFIG,
    AITool.OPENCODE: _OPENCODE_CONFIG,
    AITool.AGENT: _AGENT_CONFIG,
}


def render_bridge_readme(tool: AITool) -> str:
    label = TOOL_LABELS[tool]
    return (
        f"# {label} Integration\n"
        "\n"
        f"This directory bridges {label} with ai-cowork.\n"
        "\n"
        "## Setup\n"
        "\n"
        "The context and standards are loaded from `.ai/` directory.\n"
        "\n"
        "## Usage\n"
        "\n"
        "See `.ai/context/index.md` for context loading rules.\n"
    )


def render_bridge_config(tool: AITool) -> str:
    return _CONFIG_BODIES[tool]
