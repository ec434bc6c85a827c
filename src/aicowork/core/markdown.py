"""Markdown heading/blockquote extraction and YAML frontmatter rendering."""

from __future__ import annotations

import json
import re
from typing import Any

FRONTMATTER_MARKER = "---"

_HEADING_RE = re.compile(r"^#\s+(.+)$", re.MULTILINE)
_BLOCKQUOTE_RE = re.compile(r"^>\s*(.+)$", re.MULTILINE)
_SUMMARY_RE = re.compile(r"^#[^\n]+\n+>?\s*([^\n]+)")
_YAML_INDICATORS = frozenset("-?:,[]{}#&*!|>'\"%@`")
_YAML_KEYWORDS = frozenset({"true", "false", "yes", "no", "on", "off", "null", "~"})


def extract_title(content: str) -> str | None:
    """Return the text of the first level-1 heading, if any."""
    match = _HEADING_RE.search(content)
    return match.group(1).strip() if match else None


def extract_description(content: str) -> str | None:
    """Return the text of the first blockquote line, if any."""
    match = _BLOCKQUOTE_RE.search(content)
    return match.group(1).strip() if match else None


def extract_summary(content: str) -> str:
    """Return the first line after a leading heading, blockquote marker stripped.

    Used for resource listings; empty when the document does not open with a
    heading followed by text.
    """
    match = _SUMMARY_RE.match(content)
    if not match:
        return ""
    return re.sub(r"^>\s*", "", match.group(1)).strip()


def has_frontmatter(content: str) -> bool:
    return content.startswith(FRONTMATTER_MARKER)


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return str(value)
    text = str(value)
    needs_quotes = (
        not text
        or text != text.strip()
        or text[0] in _YAML_INDICATORS
        or ": " in text
        or " #" in text
        or text.endswith(":")
        or text.lower() in _YAML_KEYWORDS
        or "\n" in text
    )
    return json.dumps(text, ensure_ascii=False) if needs_quotes else text


def _render_mapping(data: dict[str, Any], indent: int) -> list[str]:
    lines: list[str] = []
    pad = "  " * indent
    for key, value in data.items():
        if isinstance(value, dict):
            lines.append(f"{pad}{key}:")
            lines.extend(_render_mapping(value, indent + 1))
        else:
            lines.append(f"{pad}{key}: {_scalar(value)}")
    return lines


def render_frontmatter(meta: dict[str, Any]) -> str:
    """Render *meta* as a ``---`` delimited YAML block, without trailing newline."""
    return "\n".join([FRONTMATTER_MARKER, *_render_mapping(meta, 0), FRONTMATTER_MARKER])


def with_frontmatter(meta: dict[str, Any], body: str) -> str:
    """Prefix *body* unchanged with a frontmatter block and a blank line."""
    text = f"{render_frontmatter(meta)}\n\n{body}"
    return text if text.endswith("\n") else text + "\n"
