# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for layered configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from eslint_guard.config import CONFIG_FILENAME, ConfigError, NotificationPolicy, load_config


def test_defaults_when_no_files(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.command == "eslint"
    assert config.notification is NotificationPolicy.ON_FAILURE


def test_pyproject_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n'
        '[tool.eslint-guard]\n'
        'command = "node_modules/.bin/eslint"\n'
        'cli = "--max-warnings 0"\n'
        'default-paths = ["web"]\n',
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.command == "node_modules/.bin/eslint"
    assert config.cli == ("--max-warnings", "0")
    assert config.default_paths == ("web",)


def test_dotfile_overrides_pyproject_and_cli_overrides_dotfile(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.eslint-guard]\nformatter = "compact"\nnotification = "always"\n',
        encoding="utf-8",
    )
    (tmp_path / CONFIG_FILENAME).write_text('formatter = "stylish"\nnotification = false\n', encoding="utf-8")

    config = load_config(tmp_path, overrides={"notification": "on-failure", "formatter": None})

    assert config.formatter == "stylish"
    assert config.notification is NotificationPolicy.ON_FAILURE


def test_pyproject_without_section_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.black]\nline-length = 100\n', encoding="utf-8")

    assert load_config(tmp_path).formatter is None


def test_malformed_toml_names_the_file(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("command = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match=CONFIG_FILENAME):
        load_config(tmp_path)


def test_invalid_cli_type_in_file(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("cli = 5\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="cli option"):
        load_config(tmp_path)


def test_non_table_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool]\neslint-guard = "yes"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="must be a table"):
        load_config(tmp_path)
