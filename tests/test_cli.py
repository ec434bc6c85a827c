"""End-to-end tests for the ai-cowork command line."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from aicowork.cli import build_parser, main
from aicowork.cli.commands.sync import format_sync_summary
from aicowork.cli.commands.upgrade import format_status
from aicowork.contracts.stack import Stack
from aicowork.contracts.status import InstallationStatus
from aicowork.contracts.sync import SyncResult
from aicowork.contracts.tools import AITool


def _run(*argv: str) -> int:
    return main(list(argv))


class TestParser:
    def test_init_defaults(self) -> None:
        args = build_parser().parse_args(["init"])

        assert args.command == "init"
        assert args.stack is None
        assert args.ai == "all"
        assert args.dir == "."
        assert args.bridge is True
        assert args.yes is False
        assert args.force is False
        assert args.source is None
        assert args.verbose is False

    def test_init_flags(self) -> None:
        args = build_parser().parse_args(
            ["init", "-s", "php-laravel", "-a", "claude", "-d", "/tmp/x", "--no-bridge", "-y", "-f", "-v"]
        )

        assert (args.stack, args.ai, args.dir, args.bridge, args.yes, args.force, args.verbose) == (
            "php-laravel",
            "claude",
            "/tmp/x",
            False,
            True,
            True,
            True,
        )

    def test_command_is_required(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize(
        "argv",
        [["add", "agent", "x"], ["sync", "cursor"], ["list", "--type", "plugins"]],
    )
    def test_rejects_bad_choices(self, argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(argv)
        assert exc_info.value.code == 2

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith("ai-cowork ")


class TestInit:
    def test_detected_stack(self, source_dir: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (project_dir / "package.json").write_text(json.dumps({"dependencies": {"react": "18"}}), encoding="utf-8")

        code = _run("init", "--source", str(source_dir), "--dir", str(project_dir))

        out = capsys.readouterr().out
        assert code == 0
        assert "Detected stack: react-typescript (high confidence)" in out
        assert "Reason: Found react in package.json" in out
        assert [p.name for p in (project_dir / ".ai" / "stacks").iterdir()] == ["react-typescript"]
        assert (project_dir / ".claude" / "CLAUDE.md").is_file()
        assert (project_dir / ".agent" / "AGENT.md").is_file()

    def test_explicit_stack_and_selected_bridges(self, source_dir: Path, project_dir: Path) -> None:
        code = _run("init", "--source", str(source_dir), "-d", str(project_dir), "-s", "node-express", "-a", "cursor")

        assert code == 0
        assert (project_dir / ".ai" / "stacks" / "node-express").is_dir()
        assert (project_dir / ".cursor").is_dir()
        assert not (project_dir / ".claude").exists()

    def test_stack_none(self, source_dir: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run("init", "--source", str(source_dir), "-d", str(project_dir), "-s", "none", "--no-bridge")

        assert code == 0
        assert "Skipping stack-specific files" in capsys.readouterr().out
        assert not (project_dir / ".ai" / "stacks").exists()
        assert not (project_dir / ".claude").exists()

    def test_invalid_stack(self, source_dir: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run("init", "--source", str(source_dir), "-d", str(project_dir), "-s", "django")

        out = capsys.readouterr().out
        assert code == 2
        assert "Invalid stack: django" in out
        assert not (project_dir / ".ai").exists()

    def test_undetected_with_yes(self, source_dir: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run("init", "--source", str(source_dir), "-d", str(project_dir), "--yes", "--no-bridge")

        out = capsys.readouterr().out
        assert code == 0
        assert "Could not detect stack automatically" in out
        assert "skipped - no stack selected" in out
        assert (project_dir / ".ai" / "context").is_dir()

    def test_undetected_prompts(self, monkeypatch: pytest.MonkeyPatch, source_dir: Path, project_dir: Path) -> None:
        monkeypatch.setattr("aicowork.cli.commands.init.select_stack", lambda: Stack.PHP_LARAVEL)

        code = _run("init", "--source", str(source_dir), "-d", str(project_dir), "--no-bridge")

        assert code == 0
        assert [p.name for p in (project_dir / ".ai" / "stacks").iterdir()] == ["php-laravel"]

    def test_prompt_cancelled(
        self, monkeypatch: pytest.MonkeyPatch, source_dir: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def cancel() -> None:
            raise KeyboardInterrupt

        monkeypatch.setattr("aicowork.cli.commands.init.select_stack", cancel)

        code = _run("init", "--source", str(source_dir), "-d", str(project_dir))

        assert code == 2
        assert "Aborted." in capsys.readouterr().out
        assert not (project_dir / ".ai").exists()

    def test_existing_installation_is_kept(
        self, source_dir: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (project_dir / ".ai").mkdir()

        code = _run("init", "--source", str(source_dir), "-d", str(project_dir), "-s", "none", "--no-bridge")

        assert code == 0
        assert "already exists, use --force to overwrite" in capsys.readouterr().out
        assert list((project_dir / ".ai").iterdir()) == []

    def test_missing_source(self, tmp_path: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run("init", "--source", str(tmp_path / "missing"), "-d", str(project_dir), "-s", "none")

        assert code == 3
        assert "template source not found" in capsys.readouterr().err

    def test_verbose_enables_debug_logging(
        self, monkeypatch: pytest.MonkeyPatch, source_dir: Path, project_dir: Path
    ) -> None:
        calls: list[dict[str, object]] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        _run("init", "--source", str(source_dir), "-d", str(project_dir), "-s", "none", "--no-bridge", "-v")

        assert calls and calls[0]["level"] == logging.DEBUG


class TestListCommand:
    def test_all_kinds(self, source_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run("list", "--source", str(source_dir))

        out = capsys.readouterr().out
        assert code == 0
        for heading in ("Stacks", "Skills", "Agents", "Workflows", "Standards"):
            assert heading in out
        assert "React frontend" in out

    def test_filtered(self, source_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run("list", "--source", str(source_dir), "--type", "skills")

        out = capsys.readouterr().out
        assert code == 0
        assert "code-review" in out
        assert "Stacks" not in out


class TestUpdateCommand:
    def test_not_initialized(self, source_dir: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run("update", "--source", str(source_dir), "-d", str(project_dir), "-v")

        assert code == 3
        assert "ai-cowork init" in capsys.readouterr().err

    def test_up_to_date(self, source_dir: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _run("init", "--source", str(source_dir), "-d", str(project_dir), "-s", "none", "--no-bridge")
        capsys.readouterr()

        code = _run("update", "--source", str(source_dir), "-d", str(project_dir))

        assert code == 0
        assert "Everything is up to date!" in capsys.readouterr().out

    def test_force(self, source_dir: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _run("init", "--source", str(source_dir), "-d", str(project_dir), "-s", "none", "--no-bridge")
        capsys.readouterr()

        code = _run("update", "--source", str(source_dir), "-d", str(project_dir), "--force", "-v")

        assert code == 0
        assert "Updated 5 files" in capsys.readouterr().out

    def test_invalid_stack(self, source_dir: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (project_dir / ".ai").mkdir()

        code = _run("update", "--source", str(source_dir), "-d", str(project_dir), "--stack", "django")

        assert code == 2
        assert "invalid stack" in capsys.readouterr().err


class TestAddCommand:
    def test_add_stack(self, source_dir: Path, project_dir: Path) -> None:
        _run("init", "--source", str(source_dir), "-d", str(project_dir), "-s", "none", "--no-bridge")

        code = _run("add", "stack", "php-laravel", "--source", str(source_dir), "-d", str(project_dir))

        assert code == 0
        assert (project_dir / ".ai" / "stacks" / "php-laravel" / "stack.json").is_file()

    def test_missing_skill(self, source_dir: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _run("init", "--source", str(source_dir), "-d", str(project_dir), "-s", "none", "--no-bridge")
        capsys.readouterr()

        code = _run("add", "skill", "nope", "--source", str(source_dir), "-d", str(project_dir))

        assert code == 1
        assert "skill not found: nope" in capsys.readouterr().out

    def test_not_initialized(self, source_dir: Path, project_dir: Path) -> None:
        assert _run("add", "skill", "code-review", "--source", str(source_dir), "-d", str(project_dir)) == 3


class TestSyncCommand:
    def test_sync_claude(self, source_dir: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run("sync", "claude", "--source", str(source_dir), "-d", str(project_dir))

        out = capsys.readouterr().out
        assert code == 0
        assert "ai-cowork - sync complete (claude)" in out
        assert "Commands:  1 command (generated from skills)" in out
        assert (project_dir / "CLAUDE.md").is_file()

    def test_sync_all(self, source_dir: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run("sync", "all", "--source", str(source_dir), "-d", str(project_dir))

        out = capsys.readouterr().out
        assert code == 0
        assert "sync complete (opencode)" in out
        assert "sync complete (claude)" in out
        assert (project_dir / "opencode.json").is_file()

    def test_missing_source(self, tmp_path: Path, project_dir: Path) -> None:
        assert _run("sync", "opencode", "--source", str(tmp_path / "missing"), "-d", str(project_dir)) == 3


class TestUpgradeAndStatus:
    def test_upgrade_then_status(
        self, v2_source_dir: Path, project_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (project_dir / ".ai" / "context").mkdir(parents=True)
        capsys.readouterr()

        assert _run("status", "--source", str(v2_source_dir), "-d", str(project_dir)) == 0
        assert "Version: v1 (Legacy)" in capsys.readouterr().out

        assert _run("upgrade", "--source", str(v2_source_dir), "-d", str(project_dir)) == 0
        assert ".ai/rules (2 files)" in capsys.readouterr().out

        assert _run("status", "--source", str(v2_source_dir), "-d", str(project_dir)) == 0
        assert "Version: v2 (Smart Loading)" in capsys.readouterr().out

    def test_upgrade_not_initialized(self, v2_source_dir: Path, project_dir: Path) -> None:
        assert _run("upgrade", "--source", str(v2_source_dir), "-d", str(project_dir)) == 3

    def test_status_not_initialized(self, project_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run("status", "-d", str(project_dir)) == 0
        assert "No .ai/ directory found" in capsys.readouterr().out


class TestFormatting:
    def test_sync_summary_kept_entry(self, tmp_path: Path) -> None:
        result = SyncResult(tool=AITool.OPENCODE, input_dir=tmp_path)
        result.record("skills", [tmp_path / "a", tmp_path / "b"])
        result.record("config", [tmp_path / "opencode.json"])
        result.record("entry_point", [])

        summary = format_sync_summary(result)

        assert "  Output:    .opencode/" in summary
        assert "  Skills:    2 skills" in summary
        assert "  Config:    opencode.json" in summary
        assert "  Entry:     kept existing file" in summary

    def test_status_lines(self, tmp_path: Path) -> None:
        status = InstallationStatus(
            project_dir=tmp_path,
            initialized=True,
            entries={"CONTEXT.md": True, "config.json": True, "rules/": True, "stacks/": False},
        )

        lines = format_status(status)

        assert lines[0] == "Version: v2 (Smart Loading)"
        assert "  ✓ rules/ (conditional rules)" in lines
        assert "  ✗ stacks/ (tech stack configs)" in lines
        assert "ai-cowork upgrade" not in "\n".join(lines)
