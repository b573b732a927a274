# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command that lints paths once and exits with the verdict."""

from __future__ import annotations

from contextlib import nullcontext
from pathlib import Path

import typer

from ._run_cli_models import (
    CLI_OPTION,
    COMMAND_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    FORMATTER_OPTION,
    NOTIFICATION_OPTION,
    NOTIFIER_OPTION,
    PATHS_ARGUMENT,
    ROOT_OPTION,
    RunCLIOptions,
)
from ._run_cli_services import debug_logging, emit_run_summary, perform_run
from .shared import CLIError, build_cli_logger


def run_main(
    paths: PATHS_ARGUMENT = None,
    root: ROOT_OPTION = Path("."),
    command: COMMAND_OPTION = None,
    cli: CLI_OPTION = None,
    formatter: FORMATTER_OPTION = None,
    notification: NOTIFICATION_OPTION = None,
    notifier: NOTIFIER_OPTION = "console",
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Lint PATHS with a JSON check run, then print the lint tool's own report.

    Exits 0 when the check run passed and 1 when it failed.
    """

    options = RunCLIOptions.from_cli(
        paths,
        root,
        command=command,
        cli=cli,
        formatter=formatter,
        notification=notification,
        notifier=notifier,
        emoji=emoji,
        debug=debug,
    )
    logger = build_cli_logger(emoji=options.emoji, debug=options.debug)
    scope = debug_logging(logger) if options.debug else nullcontext()
    try:
        with scope:
            outcome = perform_run(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_run_summary(outcome, logger=logger)
    raise typer.Exit(code=0 if outcome.passed else 1)


def register(app: typer.Typer) -> None:
    app.command("run")(run_main)


__all__ = ["register", "run_main"]
