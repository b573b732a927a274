# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from . import config_cmd, run

app = typer.Typer(
    name="eslint-guard",
    help="Run ESLint for a JSON verdict, then show its human-readable report.",
    no_args_is_help=True,
)
run.register(app)
config_cmd.register(app)

__all__ = ["app"]
