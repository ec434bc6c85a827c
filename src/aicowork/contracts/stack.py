"""Stack and detection contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Stack(StrEnum):
    REACT_TYPESCRIPT = "react-typescript"
    PHP_LARAVEL = "php-laravel"
    NODE_EXPRESS = "node-express"


class Confidence(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


AVAILABLE_STACKS: tuple[str, ...] = tuple(stack.value for stack in Stack)


class DetectionResult(BaseModel):
    """Best-guess stack for a project, with how sure we are and why."""

    model_config = ConfigDict(frozen=True)

    stack: Stack | None = None
    confidence: Confidence = Confidence.LOW
    reason: str
