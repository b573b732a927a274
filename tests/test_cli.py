# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the eslint-guard command-line interface."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich.logging import RichHandler
from typer.testing import CliRunner

from eslint_guard.cli.app import app
from eslint_guard.cli.shared import build_cli_logger


def test_run_passes_and_exits_zero(fake_eslint, tmp_path: Path) -> None:  # noqa: ANN001
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["run", "--root", str(tmp_path), "--notification", "off", "--no-emoji", "src/app.js"],
    )

    assert result.exit_code == 0, result.output
    assert "ESLint passed" in result.output
    assert fake_eslint.calls[0][-1] == "src/app.js"
    assert fake_eslint.cwds[0] == tmp_path.resolve()


def test_run_fails_and_lists_failed_paths(fake_eslint, report_entry, tmp_path: Path) -> None:  # noqa: ANN001
    fake_eslint.report = [report_entry("/repo/bad.js", errors=1), report_entry("/repo/good.js")]
    fake_eslint.returncode = 1
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["run", "--root", str(tmp_path), "--no-emoji", "--notifier", "console"],
    )

    assert result.exit_code == 1
    assert "ESLint failed" in result.output
    assert "/repo/bad.js" in result.output
    assert "/repo/good.js" not in result.output
    assert "2 files inspected, 1 error detected, no warnings detected" in result.output


def test_cli_flags_override_file_configuration(fake_eslint, tmp_path: Path) -> None:  # noqa: ANN001
    (tmp_path / ".eslint-guard.toml").write_text(
        'command = "npx-eslint"\nformatter = "compact"\nnotification = "off"\n',
        encoding="utf-8",
    )
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["run", "--root", str(tmp_path), "--cli=--max-warnings '0'", "--formatter", "stylish", "lib"],
    )

    assert result.exit_code == 0, result.output
    assert fake_eslint.calls[1] == ["npx-eslint", "--max-warnings", "0", "-f", "stylish", "lib"]


def test_run_reports_invalid_configuration(fake_eslint, tmp_path: Path) -> None:  # noqa: ANN001
    (tmp_path / ".eslint-guard.toml").write_text("cli = 7\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 2
    assert "cli option" in result.output
    assert fake_eslint.calls == []


def test_run_reports_unparseable_report(fake_eslint, tmp_path: Path) -> None:  # noqa: ANN001
    fake_eslint.report = "not json"
    fake_eslint.stderr = "TypeError: plugin exploded"
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--root", str(tmp_path), "--notification", "off", "--no-emoji"])

    assert result.exit_code == 1
    assert "TypeError: plugin exploded" in result.output


def test_config_command_prints_effective_configuration(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.eslint-guard]\ndefault_paths = ["web"]\nnotification = "always"\n',
        encoding="utf-8",
    )
    runner = CliRunner()
    result = runner.invoke(app, ["config", "--root", str(tmp_path)])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["default_paths"] == ["web"]
    assert data["notification"] == "always"
    assert data["command"] == "eslint"


def test_help_lists_run_options() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--help"])

    assert result.exit_code == 0
    for option in ("--cli", "--command", "--formatter", "--notification", "--notifier", "--root"):
        assert option in result.output


def test_app_registers_plain_typer_commands() -> None:
    runner = CliRunner()

    assert type(app) is typer.Typer
    for command in ("run", "config"):
        result = runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0, result.output
        assert "--root" in result.output


def test_cli_logger_exposes_only_used_channels() -> None:
    logger = build_cli_logger(emoji=False)

    assert not hasattr(logger, "warn")


def test_debug_logging_is_scoped_to_the_command(fake_eslint, tmp_path: Path) -> None:  # noqa: ANN001
    package_logger = logging.getLogger("eslint_guard")
    previous_level = package_logger.level
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["run", "--root", str(tmp_path), "--notification", "off", "--no-emoji", "--debug"],
    )

    assert result.exit_code == 0, result.output
    assert "command=" in result.output
    assert package_logger.level == previous_level
    assert not any(isinstance(handler, RichHandler) for handler in package_logger.handlers)
