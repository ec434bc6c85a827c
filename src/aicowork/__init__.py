"""Public API surface for ai-cowork."""

__version__ = "0.2.0"

from aicowork.contracts import (
    AI_BRIDGES,
    AVAILABLE_STACKS,
    AITool,
    Confidence,
    ConfigError,
    CoworkConfig,
    CoworkError,
    DetectionResult,
    InstallationStatus,
    InvalidStackError,
    NotInitializedError,
    OperationProgress,
    OperationResult,
    Outcome,
    OutcomeKind,
    Resource,
    ResourceKind,
    SourceNotFoundError,
    Stack,
    SyncResult,
    UnknownToolError,
)
from aicowork.core import (
    add_resource,
    copy_templates,
    create_bridges,
    detect_stack,
    find_package_root,
    get_updates,
    inspect_status,
    is_valid_stack,
    list_resources,
    resolve_config,
    upgrade_to_v2,
)
from aicowork.sdk import Cowork
from aicowork.sync import sync_all, sync_tool

__all__ = [
    "AI_BRIDGES",
    "AVAILABLE_STACKS",
    "AITool",
    "Confidence",
    "ConfigError",
    "Cowork",
    "CoworkConfig",
    "CoworkError",
    "DetectionResult",
    "InstallationStatus",
    "InvalidStackError",
    "NotInitializedError",
    "OperationProgress",
    "OperationResult",
    "Outcome",
    "OutcomeKind",
    "Resource",
    "ResourceKind",
    "SourceNotFoundError",
    "Stack",
    "SyncResult",
    "UnknownToolError",
    "__version__",
    "add_resource",
    "copy_templates",
    "create_bridges",
    "detect_stack",
    "find_package_root",
    "get_updates",
    "inspect_status",
    "is_valid_stack",
    "list_resources",
    "resolve_config",
    "sync_all",
    "sync_tool",
    "upgrade_to_v2",
]
