from __future__ import annotations

import ast
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1] / "src" / "aicowork"


def _collect_python_files(directory: Path) -> list[Path]:
    return sorted(path for path in directory.rglob("*.py") if path.is_file())


def _find_forbidden_imports(files: list[Path], forbidden_prefixes: tuple[str, ...]) -> list[str]:
    violations: list[str] = []
    for path in files:
        module = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(module):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    if alias.name.startswith(forbidden_prefixes):
                        violations.append(f"{path}: import {alias.name}")
            elif isinstance(node, ast.ImportFrom):
                if node.module is None:
                    continue
                if node.module.startswith(forbidden_prefixes):
                    violations.append(f"{path}: from {node.module} import ...")
    return violations


def test_contracts_import_nothing_but_contracts() -> None:
    files = _collect_python_files(PACKAGE_ROOT / "contracts")
    violations = _find_forbidden_imports(files, ("aicowork.core", "aicowork.sync", "aicowork.cli", "aicowork.sdk"))
    assert not violations, f"contracts import higher layers: {violations}"


def test_core_does_not_import_sync_or_cli() -> None:
    files = _collect_python_files(PACKAGE_ROOT / "core")
    violations = _find_forbidden_imports(files, ("aicowork.sync", "aicowork.cli", "aicowork.sdk"))
    assert not violations, f"core imports forbidden layers: {violations}"


def test_sync_does_not_import_cli() -> None:
    files = _collect_python_files(PACKAGE_ROOT / "sync")
    violations = _find_forbidden_imports(files, ("aicowork.cli", "aicowork.sdk"))
    assert not violations, f"sync imports forbidden layers: {violations}"


def test_sdk_does_not_import_cli_layer() -> None:
    violations = _find_forbidden_imports([PACKAGE_ROOT / "sdk.py"], ("aicowork.cli",))
    assert not violations, f"sdk imports forbidden cli layer modules: {violations}"


def test_only_cli_uses_terminal_libraries() -> None:
    files = [path for path in _collect_python_files(PACKAGE_ROOT) if "cli" not in path.relative_to(PACKAGE_ROOT).parts]
    violations = _find_forbidden_imports(files, ("rich", "questionary"))
    assert not violations, f"terminal libraries used outside the cli package: {violations}"
