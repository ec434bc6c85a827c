"""Heuristic technology-stack detection.

Detection is an ordered tuple of independent rules evaluated in priority
order; the first rule that produces a result wins. Manifest-based rules come
before file-extension rules, so a high-confidence framework match always
outranks loose source files of another language.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from aicowork.contracts.exceptions import InvalidStackError
from aicowork.contracts.stack import AVAILABLE_STACKS, Confidence, DetectionResult, Stack

logger = logging.getLogger(__name__)

_SCAN_MAX_DEPTH = 8
_SCAN_IGNORED_DIRS = frozenset(
    {
        ".ai",
        ".agent",
        ".claude",
        ".cursor",
        ".git",
        ".hg",
        ".opencode",
        ".svn",
        ".venv",
        "__pycache__",
        "build",
        "dist",
        "node_modules",
        "vendor",
        "venv",
    }
)


@dataclass
class ProjectManifests:
    """Everything the detection rules look at, read once per detection."""

    root: Path
    composer: dict[str, Any] | None = None
    package: dict[str, Any] | None = None
    _extensions: set[str] | None = field(default=None, repr=False)

    @classmethod
    def load(cls, root: Path) -> ProjectManifests:
        return cls(
            root=root,
            composer=_read_manifest(root / "composer.json"),
            package=_read_manifest(root / "package.json"),
        )

    def composer_requires(self) -> dict[str, Any]:
        return _mapping(self.composer, "require")

    def dependencies(self) -> dict[str, Any]:
        return _mapping(self.package, "dependencies")

    def dev_dependencies(self) -> dict[str, Any]:
        return _mapping(self.package, "devDependencies")

    def has_extension(self, *suffixes: str) -> bool:
        if self._extensions is None:
            self._extensions = set(_scan_extensions(self.root))
        return any(suffix in self._extensions for suffix in suffixes)


def _read_manifest(path: Path) -> dict[str, Any] | None:
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.debug("ignoring manifest %s: %s", path, exc)
        return None
    if not isinstance(data, dict):
        logger.debug("ignoring manifest %s: top level is not an object", path)
        return None
    return data


def _mapping(manifest: dict[str, Any] | None, key: str) -> dict[str, Any]:
    if manifest is None:
        return {}
    value = manifest.get(key)
    return value if isinstance(value, dict) else {}


def _scan_extensions(root: Path) -> Iterable[str]:
    base_depth = len(root.parts)
    for dirpath, dirnames, filenames in os.walk(root, onerror=lambda exc: logger.debug("scan error: %s", exc)):
        depth = len(Path(dirpath).parts) - base_depth
        if depth >= _SCAN_MAX_DEPTH:
            dirnames[:] = []
        else:
            dirnames[:] = [name for name in dirnames if name not in _SCAN_IGNORED_DIRS]
        for filename in filenames:
            yield Path(filename).suffix.lower()


DetectionRule = Callable[[ProjectManifests], DetectionResult | None]


def _dependency_rule(
    package: str,
    stack: Stack,
    *,
    source: Callable[[ProjectManifests], dict[str, Any]],
    manifest_name: str,
) -> DetectionRule:
    def rule(manifests: ProjectManifests) -> DetectionResult | None:
        if package not in source(manifests):
            return None
        return DetectionResult(
            stack=stack,
            confidence=Confidence.HIGH,
            reason=f"Found {package} in {manifest_name}",
        )

    return rule


def _typescript_only(manifests: ProjectManifests) -> DetectionResult | None:
    if "typescript" in manifests.dependencies() or "typescript" in manifests.dev_dependencies():
        return DetectionResult(
            stack=Stack.REACT_TYPESCRIPT,
            confidence=Confidence.LOW,
            reason="Found typescript in package.json but no known framework",
        )
    return None


def _component_files(manifests: ProjectManifests) -> DetectionResult | None:
    if manifests.has_extension(".tsx", ".jsx"):
        return DetectionResult(
            stack=Stack.REACT_TYPESCRIPT,
            confidence=Confidence.MEDIUM,
            reason="Found .tsx/.jsx component files",
        )
    return None


def _php_files(manifests: ProjectManifests) -> DetectionResult | None:
    if manifests.has_extension(".php"):
        return DetectionResult(
            stack=Stack.PHP_LARAVEL,
            confidence=Confidence.LOW,
            reason="Found .php files but no composer.json framework",
        )
    return None


DETECTION_RULES: tuple[DetectionRule, ...] = (
    _dependency_rule(
        "laravel/framework",
        Stack.PHP_LARAVEL,
        source=ProjectManifests.composer_requires,
        manifest_name="composer.json",
    ),
    _dependency_rule(
        "react",
        Stack.REACT_TYPESCRIPT,
        source=ProjectManifests.dependencies,
        manifest_name="package.json",
    ),
    _dependency_rule(
        "express",
        Stack.NODE_EXPRESS,
        source=ProjectManifests.dependencies,
        manifest_name="package.json",
    ),
    _typescript_only,
    _component_files,
    _php_files,
)


def detect_stack(
    project_dir: str | Path,
    *,
    rules: tuple[DetectionRule, ...] = DETECTION_RULES,
) -> DetectionResult:
    """Guess the technology stack of *project_dir* without modifying it.

    The source-file rules look at most eight directory levels below
    *project_dir* and skip dependency, VCS and bridge directories.
    """
    manifests = ProjectManifests.load(Path(project_dir))
    for rule in rules:
        result = rule(manifests)
        if result is not None:
            logger.debug("stack detected by %s: %s", getattr(rule, "__name__", rule), result.reason)
            return result
    return DetectionResult(stack=None, confidence=Confidence.LOW, reason="no stack detected")


def is_valid_stack(name: str) -> bool:
    return name in AVAILABLE_STACKS


def parse_stack(name: str) -> Stack:
    if not is_valid_stack(name):
        raise InvalidStackError(name, available=AVAILABLE_STACKS)
    return Stack(name)
