"""Claude Code layout: ``.claude/{skills,rules,commands,agents}`` and ``CLAUDE.md``."""

from __future__ import annotations

import logging
from pathlib import Path

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

SUBDIRS: tuple[str, ...] = ("commands", "skills", "rules", "agents")


def default_claude_md(project_dir: Path, ai_dir: Path) -> str:
    skills = [f"- {skill_dir.name}" for skill_dir in list_skill_dirs(ai_dir / "skills")]
    skills_list = "\n".join(skills) if skills else "- (none)"
    return f"""\
# {project_dir.name}

## Project Overview

[Brief description of the project]

## Tech Stack

[List the main technologies used]

## AI Context

This project uses ai-cowork. Smart loading is enabled:

### Entry Point
- `.ai/CONTEXT.md` - Main context (auto-loaded)

### Conditional Rules
Rules in `.claude/rules/` are auto-loaded based on file patterns.

### Skills
Custom skills available in `.claude/skills/`:
{skills_list}

### Loading Principle
**Only load context relevant to the current task. Never preload "just in case".**
"""


class ClaudeTarget(SyncTarget):
    tool = AITool.CLAUDE

    def sync(self, ai_dir: Path, project_dir: Path) -> SyncResult:
        result = SyncResult(tool=self.tool, input_dir=ai_dir)
        root = project_dir / ".claude"
        for name in SUBDIRS:
            (root / name).mkdir(parents=True, exist_ok=True)

        skills_dir = ai_dir / "skills"
        skills = [convert_skill(skill_dir, root / "skills") for skill_dir in list_skill_dirs(skills_dir)]
        result.record("skills", [path for path in skills if path is not None])

        result.record("rules", copy_markdown_files(ai_dir / "rules", root / "rules"))

        commands_dir = ai_dir / "commands"
        if commands_dir.is_dir():
            result.record("commands", copy_markdown_files(commands_dir, root / "commands"))
        else:
            result.record("commands", generate_commands_from_skills(skills_dir, root / "commands"))
            result.commands_generated = True

        agents = [convert_agent(agent, root / "agents") for agent in list_markdown_files(ai_dir / "agents")]
        result.record("agents", agents)

        entry = write_entry_point(project_dir, ai_dir, "CLAUDE.md", default_claude_md)
        result.record("entry_point", [entry] if entry is not None else [])

        logger.debug("claude sync wrote %d files", len(result.written))
        return result
