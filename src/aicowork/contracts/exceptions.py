"""Exception hierarchy for ai-cowork.

All ai-cowork exceptions inherit from :class:`CoworkError`, so callers can
catch any library error with a single ``except`` clause while still handling
specific failure modes.
"""

from __future__ import annotations


class CoworkError(Exception):
    """Base exception for all ai-cowork errors."""


class ConfigError(CoworkError):
    """Configuration loading or validation failure."""


class SourceNotFoundError(ConfigError):
    """The bundled template tree could not be located."""

    def __init__(self, path: object) -> None:
        super().__init__(f"template source not found: {path}")
        self.path = path


class NotInitializedError(CoworkError):
    """The target project has no ``.ai`` directory yet."""

    def __init__(self, path: object) -> None:
        super().__init__(f".ai directory not found in {path} (run `ai-cowork init` first)")
        self.path = path


class InvalidStackError(CoworkError):
    """A stack name outside the known set was requested."""

    def __init__(self, name: str, *, available: tuple[str, ...] = ()) -> None:
        message = f"invalid stack: {name!r}"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message)
        self.name = name


class UnknownToolError(CoworkError):
    """An AI tool name outside the supported set was requested."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown AI tool: {name!r}")
        self.name = name
