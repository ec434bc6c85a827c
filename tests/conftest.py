"""Shared test fixtures for ai-cowork tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from aicowork.contracts.config import CoworkConfig

SKILL_BODY = "# Code Review\n\n> Review a change for correctness.\n\nSteps go here.\n"
AGENT_BODY = "# Reviewer\n\n> Reviews pull requests.\n"


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """A small template tree shaped like the bundled ``.ai`` directory."""
    root = tmp_path / "source" / ".ai"
    write(root / "context" / "index.md", "# Context\n")
    write(root / "context" / "core" / "standards" / "quality.md", "# Quality\n\n> Keep it simple.\n")
    write(root / "context" / "core" / "workflows" / "feature.md", "# Feature\n\nShip small.\n")
    write(root / "skills" / "code-review" / "SKILL.md", SKILL_BODY)
    write(root / "agents" / "reviewer.md", AGENT_BODY)
    (root / "templates").mkdir(parents=True)
    write(root / "templates" / "pr.md", "# PR\n")
    write(root / "stacks" / "react-typescript" / "stack.json", '{"description": "React frontend"}')
    write(root / "stacks" / "php-laravel" / "stack.json", "{}")
    write(root / "stacks" / "node-express" / "stack.json", "not json")
    return root


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def config(source_dir: Path, project_dir: Path) -> CoworkConfig:
    return CoworkConfig(source_dir=source_dir, project_dir=project_dir)


@pytest.fixture
def v2_source_dir(source_dir: Path) -> Path:
    """The template tree with the v2 entry point, config, rules and commands."""
    write(source_dir / "CONTEXT.md", "# Project Context\n\nLoad only what you need.\n")
    write(source_dir / "config.json", '{"version": 2}\n')
    write(source_dir / "rules" / "testing.md", "# Testing\n")
    write(source_dir / "rules" / "typescript.md", "# TypeScript\n")
    write(source_dir / "commands" / "review.md", "---\ndescription: Review\n---\n\nReview it.\n")
    return source_dir
