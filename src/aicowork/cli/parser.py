"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from aicowork.contracts.stack import AVAILABLE_STACKS
from aicowork.contracts.status import ResourceKind
from aicowork.core.resources import ADDABLE_KINDS


def _package_version() -> str:
    try:
        return version("ai-cowork")
    except PackageNotFoundError:
        return "0.0.0"


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--source", default=None, help="Template tree to install from (default: bundled .ai)")
    common.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-cowork",
        description="Cross-stack AI development workflow system",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    common = _common_options()
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", parents=[common], help="Initialize ai-cowork in a project")
    init_parser.add_argument(
        "--stack",
        "-s",
        default=None,
        help=f"Technology stack ({', '.join(AVAILABLE_STACKS)}, none)",
    )
    init_parser.add_argument(
        "--ai",
        "-a",
        default="all",
        help="AI tool bridges, comma separated (claude, cursor, opencode, agent, all)",
    )
    init_parser.add_argument("--dir", "-d", default=".", help="Target directory")
    init_parser.add_argument(
        "--no-bridge",
        dest="bridge",
        action="store_false",
        help="Skip creating bridge directories",
    )
    init_parser.add_argument(
        "--yes",
        "-y",
        action="store_true",
        help="Skip prompts, use defaults (no stack-specific files if undetected)",
    )
    init_parser.add_argument("--force", "-f", action="store_true", help="Overwrite an existing .ai directory")

    list_parser = subparsers.add_parser(
        "list", parents=[common], help="List available stacks, skills, agents, workflows, and standards"
    )
    list_parser.add_argument(
        "--type",
        "-t",
        choices=[kind.value for kind in ResourceKind],
        default=None,
        help="Filter by resource type",
    )

    update_parser = subparsers.add_parser("update", parents=[common], help="Update an existing installation")
    update_parser.add_argument("--stack", "-s", default=None, help="Also update this stack")
    update_parser.add_argument("--force", "-f", action="store_true", help="Force update (overwrite local changes)")
    update_parser.add_argument("--dir", "-d", default=".", help="Target project directory")

    add_parser = subparsers.add_parser("add", parents=[common], help="Add a stack or skill to an existing project")
    add_parser.add_argument("kind", choices=ADDABLE_KINDS, help="Type to add")
    add_parser.add_argument("name", help="Name of the stack or skill")
    add_parser.add_argument("--force", "-f", action="store_true", help="Overwrite if already present")
    add_parser.add_argument("--dir", "-d", default=".", help="Target project directory")

    sync_parser = subparsers.add_parser("sync", parents=[common], help="Sync ai-cowork to AI tool formats")
    sync_parser.add_argument("tool", choices=["opencode", "claude", "all"], help="Tool format to generate")
    sync_parser.add_argument("--dir", "-d", default=".", help="Target project directory")

    upgrade_parser = subparsers.add_parser(
        "upgrade", parents=[common], help="Upgrade to the v2 structure with smart loading"
    )
    upgrade_parser.add_argument("--dir", "-d", default=".", help="Target project directory")
    upgrade_parser.add_argument("--force", "-f", action="store_true", help="Overwrite existing files")

    status_parser = subparsers.add_parser("status", parents=[common], help="Show ai-cowork status and version")
    status_parser.add_argument("--dir", "-d", default=".", help="Target project directory")

    return parser


__all__ = ["build_parser"]
