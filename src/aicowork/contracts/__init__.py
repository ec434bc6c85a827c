"""Public contracts for ai-cowork."""

from aicowork.contracts.config import CoworkConfig
from aicowork.contracts.exceptions import (
    ConfigError,
    CoworkError,
    InvalidStackError,
    NotInitializedError,
    SourceNotFoundError,
    UnknownToolError,
)
from aicowork.contracts.progress import NullOperationProgress, OperationProgress
from aicowork.contracts.result import OperationResult, Outcome, OutcomeKind
from aicowork.contracts.stack import AVAILABLE_STACKS, Confidence, DetectionResult, Stack
from aicowork.contracts.status import InstallationStatus, Resource, ResourceKind
from aicowork.contracts.sync import SyncResult, SyncTarget
from aicowork.contracts.tools import AI_BRIDGES, BRIDGE_CONFIG_FILES, TOOL_LABELS, AITool, ToolSelection

__all__ = [
    "AI_BRIDGES",
    "AVAILABLE_STACKS",
    "BRIDGE_CONFIG_FILES",
    "TOOL_LABELS",
    "AITool",
    "Confidence",
    "ConfigError",
    "CoworkConfig",
    "CoworkError",
    "DetectionResult",
    "InstallationStatus",
    "InvalidStackError",
    "NotInitializedError",
    "NullOperationProgress",
    "OperationProgress",
    "OperationResult",
    "Outcome",
    "OutcomeKind",
    "Resource",
    "ResourceKind",
    "SourceNotFoundError",
    "Stack",
    "SyncResult",
    "SyncTarget",
    "ToolSelection",
    "UnknownToolError",
]
