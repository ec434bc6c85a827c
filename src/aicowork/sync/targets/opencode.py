"""OpenCode layout: ``.opencode/{skill,agent,command,plugin}``, ``opencode.json``, ``AGENTS.md``."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from aicowork.contracts.sync import SyncResult, SyncTarget
from aicowork.contracts.tools import AITool
from aicowork.sync.convert import (
    convert_agent,
    convert_skill,
    copy_markdown_files,
    generate_commands_from_skills,
    list_markdown_files,
    list_skill_dirs,
    write_entry_point,
)

logger = logging.getLogger(__name__)

PLUGIN_FILENAME = "ai-cowork-hooks.ts"

OPENCODE_CONFIG: dict[str, Any] = {
    "$schema": "https://opencode.ai/config.json",
    "theme": "opencode",
    "autoupdate": True,
    "share": "manual",
    "instructions": [".ai/CONTEXT.md"],
    "permission": {
        "edit": "allow",
        "write": "allow",
        "bash": "allow",
        "skill": {"*": "allow"},
    },
    "compaction": {"auto": True, "prune": True},
    "formatter": {"prettier": {"disabled": False}},
}

_PLUGIN_TEMPLATE = """\
import type { Plugin } from "@opencode-ai/plugin"

/**
 * AI Cowork Plugin
 *
 * Provides hooks for automatic context loading and smart loading.
 */
export const AiCoworkPlugin: Plugin = async ({ project, client, $, directory }) => {
  await client.app.log({
    service: "ai-cowork-plugin",
    level: "info",
    message: "AI Cowork plugin loaded - Smart context loading enabled",
  })

  return {
    "session.created": async () => {
      await client.app.log({
        service: "ai-cowork-plugin",
        level: "info",
        message: "Session created - Load .ai/CONTEXT.md for smart context routing",
      })
    },

    "tool.execute.before": async (input, output) => {
      const protectedPatterns = [".env", "credentials", "secrets", ".pem", ".key", "password"]

      if (input.tool === "read") {
        const filePath = output.args.filePath?.toLowerCase() || ""
        for (const pattern of protectedPatterns) {
          if (filePath.includes(pattern)) {
            throw new Error(`Protected file access denied: ${pattern}`)
          }
        }
      }
    },

    "file.edited": async ({ path }) => {
      await client.app.log({
        service: "ai-cowork-plugin",
        level: "debug",
        message: `File edited: ${path}`,
      })
    },
  }
}
"""


def default_agents_md(project_dir: Path, ai_dir: Path) -> str:
    del ai_dir
    return f"""\
# {project_dir.name}

## Project Overview

[Brief description of the project]

## Tech Stack

[List the main technologies used]

## AI Context

This project uses ai-cowork for AI-assisted development.

### Smart Loading

Load only what you need:
- `.ai/CONTEXT.md` - Main entry point
- `.ai/rules/` - Auto-applied based on file type
- `.ai/context/` - Standards and workflows

### Available Resources
- `.ai/skills/` - Reusable AI skills
- `.ai/agents/` - Specialized AI agents
- `.ai/commands/` - Custom slash commands
"""


class OpenCodeTarget(SyncTarget):
    tool = AITool.OPENCODE

    def sync(self, ai_dir: Path, project_dir: Path) -> SyncResult:
        result = SyncResult(tool=self.tool, input_dir=ai_dir)
        root = project_dir / ".opencode"
        root.mkdir(parents=True, exist_ok=True)

        skills_dir = ai_dir / "skills"
        skills = [convert_skill(skill_dir, root / "skill") for skill_dir in list_skill_dirs(skills_dir)]
        result.record("skills", [path for path in skills if path is not None])

        agents = [convert_agent(agent, root / "agent") for agent in list_markdown_files(ai_dir / "agents")]
        result.record("agents", agents)

        commands_dir = ai_dir / "commands"
        if commands_dir.is_dir():
            result.record("commands", copy_markdown_files(commands_dir, root / "command"))
        else:
            result.record("commands", generate_commands_from_skills(skills_dir, root / "command"))
            result.commands_generated = True

        plugin = root / "plugin" / PLUGIN_FILENAME
        plugin.parent.mkdir(parents=True, exist_ok=True)
        plugin.write_text(_PLUGIN_TEMPLATE, encoding="utf-8")
        result.record("plugins", [plugin])

        config_path = project_dir / "opencode.json"
        config_path.write_text(json.dumps(OPENCODE_CONFIG, indent=2) + "\n", encoding="utf-8")
        result.record("config", [config_path])

        entry = write_entry_point(project_dir, ai_dir, "AGENTS.md", default_agents_md)
        result.record("entry_point", [entry] if entry is not None else [])

        logger.debug("opencode sync wrote %d files", len(result.written))
        return result
