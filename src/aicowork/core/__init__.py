"""Core filesystem operations: detection, copying, updating, upgrading."""

from aicowork.core.copier import copy_templates, create_bridges, parse_tools
from aicowork.core.detector import detect_stack, is_valid_stack, parse_stack
from aicowork.core.paths import find_package_root, resolve_config, source_ai_dir, target_ai_dir
from aicowork.core.resources import add_resource, list_resources
from aicowork.core.updater import apply_updates, get_updates, update_installation
from aicowork.core.upgrade import inspect_status, upgrade_to_v2

__all__ = [
    "add_resource",
    "apply_updates",
    "copy_templates",
    "create_bridges",
    "detect_stack",
    "find_package_root",
    "get_updates",
    "inspect_status",
    "is_valid_stack",
    "list_resources",
    "parse_stack",
    "parse_tools",
    "resolve_config",
    "source_ai_dir",
    "target_ai_dir",
    "update_installation",
    "upgrade_to_v2",
]
