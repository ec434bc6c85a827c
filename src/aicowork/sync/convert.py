"""One-way conversion of ``.ai`` skills, agents, rules and commands.

Every converter treats a missing input as "nothing to convert" and returns
an empty result rather than raising.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from pathlib import Path

from aicowork.core.markdown import extract_description, extract_title, has_frontmatter, with_frontmatter

logger = logging.getLogger(__name__)

SKILL_FILE = "SKILL.md"
DEFAULT_AGENT_MODEL = "anthropic/claude-sonnet-4-5"
SKILL_LICENSE = "MIT"
SKILL_COMPATIBILITY = "opencode"
SOURCE_TAG = "ai-cowork"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.debug("wrote %s", path)
    return path


def list_skill_dirs(skills_dir: Path) -> list[Path]:
    if not skills_dir.is_dir():
        return []
    return sorted(entry for entry in skills_dir.iterdir() if entry.is_dir())


def list_markdown_files(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(entry for entry in directory.iterdir() if entry.is_file() and entry.suffix == ".md")


def convert_skill(skill_dir: Path, dest_root: Path, name: str | None = None) -> Path | None:
    """Write ``<dest_root>/<name>/SKILL.md`` with a skill metadata header.

    The original skill body follows the header verbatim. Returns ``None``
    when *skill_dir* has no ``SKILL.md``.
    """
    source = skill_dir / SKILL_FILE
    if not source.is_file():
        logger.debug("skipping %s: no %s", skill_dir, SKILL_FILE)
        return None

    name = name or skill_dir.name
    content = _read(source)
    title = extract_title(content) or name
    description = extract_description(content) or f"{title} skill"
    meta = {
        "name": name,
        "description": description,
        "license": SKILL_LICENSE,
        "compatibility": SKILL_COMPATIBILITY,
        "metadata": {"source": SOURCE_TAG},
    }
    return _write(dest_root / name / SKILL_FILE, with_frontmatter(meta, content))


def convert_agent(agent_file: Path, dest_dir: Path) -> Path:
    """Copy an agent definition, adding an agent header when it has none."""
    content = _read(agent_file)
    dest = dest_dir / agent_file.name
    if has_frontmatter(content):
        return _write(dest, content)

    name = agent_file.stem
    description = extract_title(content) or extract_description(content) or f"{name} agent"
    meta = {"description": description, "model": DEFAULT_AGENT_MODEL}
    return _write(dest, with_frontmatter(meta, content))


def copy_markdown_files(src_dir: Path, dest_dir: Path) -> list[Path]:
    """Copy every ``*.md`` file of *src_dir* into *dest_dir*, keeping names."""
    copied: list[Path] = []
    for source in list_markdown_files(src_dir):
        dest_dir.mkdir(parents=True, exist_ok=True)
        copied.append(Path(shutil.copyfile(source, dest_dir / source.name)))
    return copied


def _skill_command(skill: str, description: str) -> str:
    meta = {"description": description, "skill": skill}
    body = f"Load and execute the {skill} skill for the current context.\n\n$ARGUMENTS\n"
    return with_frontmatter(meta, body)


def generate_commands_from_skills(skills_dir: Path, dest_dir: Path) -> list[Path]:
    """Synthesize one command per skill, each invoking that skill."""
    written: list[Path] = []
    for skill_dir in list_skill_dirs(skills_dir):
        skill_file = skill_dir / SKILL_FILE
        if not skill_file.is_file():
            continue
        skill = skill_dir.name
        description = extract_description(_read(skill_file)) or f"Run {skill} skill"
        written.append(_write(dest_dir / f"{skill}.md", _skill_command(skill, description)))
    return written


def write_entry_point(
    project_dir: Path,
    ai_dir: Path,
    filename: str,
    default_builder: Callable[[Path, Path], str],
) -> Path | None:
    """Write the tool's top-level entry document into *project_dir*.

    ``.ai/CONTEXT.md`` is copied verbatim when it exists. Otherwise the
    default built by *default_builder* is written, but never over an
    existing file. Returns the written path, or ``None`` when left alone.
    """
    dest = project_dir / filename
    context = ai_dir / "CONTEXT.md"
    if context.is_file():
        return _write(dest, _read(context))
    if dest.exists():
        logger.debug("keeping existing %s", dest)
        return None
    return _write(dest, default_builder(project_dir, ai_dir))
