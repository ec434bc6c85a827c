"""Template-root resolution and small filesystem predicates."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from aicowork.contracts.config import CoworkConfig
from aicowork.contracts.exceptions import SourceNotFoundError

logger = logging.getLogger(__name__)

PACKAGE_NAME = "ai-cowork"
SOURCE_ENV_VAR = "AI_COWORK_SOURCE"

_MAX_HOPS = 10
_FALLBACK_DEPTH = 3


def _declares_package(manifest: Path) -> bool:
    try:
        data = tomllib.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        logger.debug("ignoring unreadable manifest %s", manifest)
        return False
    project = _table(data, "project")
    poetry = _table(_table(data, "tool"), "poetry")
    return PACKAGE_NAME in (project.get("name"), poetry.get("name"))


def _table(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def find_package_root(start: Path | None = None) -> Path:
    """Locate the directory that holds the bundled ``.ai`` template tree.

    Walks upward from *start* (defaults to this module's directory) looking
    for either a ``.ai`` directory or a ``pyproject.toml`` that declares this
    package. Works from a source checkout and from an installed location with
    a different nesting depth. Never raises: when nothing matches, falls back
    to a fixed offset above *start*.
    """
    origin = (start or Path(__file__).parent).resolve()
    current = origin
    for _ in range(_MAX_HOPS):
        if directory_exists(current / ".ai"):
            return current
        manifest = current / "pyproject.toml"
        if file_exists(manifest) and _declares_package(manifest):
            return current
        if current.parent == current:
            break
        current = current.parent

    fallback = origin.joinpath(*([".."] * _FALLBACK_DEPTH)).resolve()
    logger.debug("package root not found above %s; falling back to %s", origin, fallback)
    return fallback


def source_ai_dir(root: Path | None = None) -> Path:
    return (root or find_package_root()) / ".ai"


def target_ai_dir(project_dir: str | Path) -> Path:
    return Path(project_dir).resolve() / ".ai"


def directory_exists(path: str | Path) -> bool:
    try:
        return Path(path).is_dir()
    except OSError:
        return False


def file_exists(path: str | Path) -> bool:
    try:
        return Path(path).is_file()
    except OSError:
        return False


def resolve_config(project_dir: str | Path = ".", *, source: str | Path | None = None) -> CoworkConfig:
    """Build the explicit configuration for one invocation.

    The template root comes from *source* when given, then from the
    ``AI_COWORK_SOURCE`` environment variable, then from
    :func:`find_package_root`.
    """
    if source is not None:
        source_dir = Path(source).expanduser().resolve()
    elif os.environ.get(SOURCE_ENV_VAR):
        source_dir = Path(os.environ[SOURCE_ENV_VAR]).expanduser().resolve()
    else:
        source_dir = source_ai_dir()
    return CoworkConfig(source_dir=source_dir, project_dir=Path(project_dir).expanduser().resolve())


def require_source_dir(config: CoworkConfig) -> Path:
    if not directory_exists(config.source_dir):
        raise SourceNotFoundError(config.source_dir)
    return config.source_dir
