# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command that prints the effective configuration."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from ..config import ConfigError, load_config
from ._run_cli_models import ROOT_OPTION
from .shared import CONFIG_ERROR_EXIT_CODE, build_cli_logger


def show_config(root: ROOT_OPTION = Path(".")) -> None:
    """Print the merged configuration (defaults, pyproject.toml, .eslint-guard.toml) as JSON."""

    logger = build_cli_logger(emoji=True)
    try:
        config = load_config(root.resolve())
    except ConfigError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from exc
    logger.echo(json.dumps(config.to_dict(), indent=2, sort_keys=True))


def register(app: typer.Typer) -> None:
    app.command("config")(show_config)


__all__ = ["register", "show_config"]
