# SPDX-License-Identifier: MIT
"""Helper services used by the ``run`` CLI command."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from rich.logging import RichHandler

from ..config import ConfigError, RunnerConfig, load_config
from ..errors import RunnerError
from ..notifications import build_notifier
from ..runner import Runner
from ._run_cli_models import RunCLIOptions
from .shared import CONFIG_ERROR_EXIT_CODE, CLIError, CLILogger

_PACKAGE_LOGGER = "eslint_guard"


@dataclass(frozen=True, slots=True)
class RunOutcome:
    """Verdict and failing files reported by one CLI run."""

    passed: bool
    failed_paths: tuple[str, ...]


@contextmanager
def debug_logging(logger: CLILogger) -> Iterator[None]:
    """Route package debug records (issued commands, report paths) to the CLI console.

    The handler and the DEBUG level only last for the duration of the block.
    """

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    handler = RichHandler(console=logger.console, show_path=False, markup=False)
    previous_level = package_logger.level
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    try:
        yield
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)


def resolve_config(options: RunCLIOptions, *, logger: CLILogger) -> RunnerConfig:
    """Load layered configuration for ``options.root`` and apply CLI overrides.

    Raises:
        CLIError: Raised with exit status 2 when configuration is invalid.
    """

    try:
        config = load_config(options.root, overrides=options.overrides)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc), exit_code=CONFIG_ERROR_EXIT_CODE) from exc
    logger.debug(f"command={config.command} notification={config.notification.value}")
    return config


def perform_run(options: RunCLIOptions, *, logger: CLILogger) -> RunOutcome:
    """Run the lint tool once for the CLI options.

    Args:
        options: Normalized CLI options.
        logger: Logger used to emit user-facing messages.

    Returns:
        RunOutcome: Verdict plus the files that produced messages.

    Raises:
        CLIError: Raised when configuration is invalid or the lint tool cannot run.
    """

    config = resolve_config(options, logger=logger)
    try:
        notifier = build_notifier(options.notifier, use_emoji=options.emoji)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc), exit_code=CONFIG_ERROR_EXIT_CODE) from exc

    with Runner(config, notifier=notifier, cwd=options.root) as runner:
        try:
            passed = runner.run(options.paths)
            failed = tuple(runner.failed_paths())
        except RunnerError as exc:
            logger.fail(str(exc))
            raise CLIError(str(exc)) from exc
    return RunOutcome(passed=passed, failed_paths=failed)


def emit_run_summary(outcome: RunOutcome, *, logger: CLILogger) -> None:
    if outcome.passed:
        logger.ok("ESLint passed")
    else:
        logger.fail("ESLint failed")
    for path in outcome.failed_paths:
        logger.echo(f"  {path}")


__all__ = [
    "RunOutcome",
    "debug_logging",
    "emit_run_summary",
    "perform_run",
    "resolve_config",
]
