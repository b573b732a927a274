# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the lint tool twice: once for a JSON verdict, once for the human report.

ESLint cannot emit two formatters in the same invocation, so a run is split
into a *check* phase, which writes JSON to a private temporary file and
captures both output streams, and an *output* phase, which lets the tool print
its own report straight to the terminal with the user's formatter.

A :class:`Runner` instance performs exactly one run. Create a fresh instance
for every run and close it (or use it as a context manager) to remove the
temporary report file.
"""

from __future__ import annotations

import logging
import os
import tempfile
import weakref
from collections.abc import Sequence
from functools import cached_property
from pathlib import Path
from typing import Final

from .config import RunnerConfig
from .errors import RunnerError
from .notifications import NOTIFICATION_TITLE, NotificationImage, Notifier, NullNotifier
from .process_utils import format_command, run_command
from .results import LintResult, parse_lint_result
from .summary import summary_text

LOGGER = logging.getLogger(__name__)

JSON_FORMAT_ARGS: Final[tuple[str, ...]] = ("-f", "json", "-o")
_TEMP_PREFIX: Final[str] = "eslint_guard_runner_"


def _remove_file(path: Path) -> None:
    path.unlink(missing_ok=True)


class Runner:
    """Invoke the lint tool for one set of paths and report the verdict."""

    def __init__(
        self,
        config: RunnerConfig,
        *,
        notifier: Notifier | None = None,
        cwd: Path | None = None,
    ) -> None:
        self._config = config
        self._notifier: Notifier = notifier if notifier is not None else NullNotifier()
        self._cwd = cwd
        self._ran = False
        self._closed = False
        self._finalizer: weakref.finalize | None = None
        self.check_stdout: str | None = None
        self.check_stderr: str | None = None
        self.check_returncode: int | None = None

    @property
    def config(self) -> RunnerConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    def run(self, paths: Sequence[str | os.PathLike[str]] | None = None) -> bool:
        """Lint ``paths`` and return ``True`` when the check phase exited with status 0.

        The verdict comes from the exit status of the JSON invocation only; the
        error counts in the report and the exit status of the output phase do
        not change it.

        Args:
            paths: Files or directories to lint. Falls back to
                ``config.default_paths`` when empty or ``None``.

        Returns:
            bool: ``True`` when the lint tool reported success.

        Raises:
            RunnerError: Raised when the tool cannot be spawned or the runner was
                already used or closed.
            ResultParseError: Raised when a notification needs the JSON report
                and it cannot be parsed.
        """

        if self.closed:
            raise RunnerError("Runner has been closed")
        if self._ran:
            raise RunnerError("Runner instances are single-use; create a new Runner for each run")
        self._ran = True

        targets = [os.fspath(path) for path in paths] if paths else list(self._config.default_paths)
        passed = self._run_for_check(targets)
        if self._config.notification.should_notify(passed):
            self._notify(passed)
        self._run_for_output(targets)
        return passed

    def failed_paths(self) -> list[str]:
        """Return paths of files that produced at least one message, whatever the verdict."""

        return self.result.failed_paths()

    @cached_property
    def user_args(self) -> list[str]:
        return list(self._config.cli)

    @cached_property
    def json_file_path(self) -> Path:
        """Return the private report path, creating the file on first access.

        The descriptor is closed immediately so the lint tool can open the path
        for writing on every platform.
        """

        fd, raw_path = tempfile.mkstemp(prefix=_TEMP_PREFIX, suffix=".json")
        os.close(fd)
        path = Path(raw_path)
        self._finalizer = weakref.finalize(self, _remove_file, path)
        LOGGER.debug("report path=%s", path)
        return path

    @cached_property
    def result(self) -> LintResult:
        """Return the parsed JSON report, reading it on first access."""

        if self.check_returncode is None:
            raise RunnerError("No lint result is available before run()")
        if self.closed:
            raise RunnerError("Runner has been closed; the JSON report was removed")
        stdout = self.check_stdout or ""
        stderr = self.check_stderr or ""
        try:
            payload = self.json_file_path.read_text(encoding="utf-8")
        except OSError as exc:
            payload = ""
            LOGGER.debug("report unreadable path=%s error=%s", self.json_file_path, exc)
        return parse_lint_result(payload, stdout=stdout, stderr=stderr)

    def command_for_check(self, paths: Sequence[str]) -> list[str]:
        return [self._config.command, *self.user_args, *JSON_FORMAT_ARGS, str(self.json_file_path), *paths]

    def command_for_output(self, paths: Sequence[str]) -> list[str]:
        command = [self._config.command, *self.user_args]
        if self._config.formatter:
            command.extend(["-f", self._config.formatter])
        command.extend(paths)
        return command

    def close(self) -> None:
        """Remove the temporary JSON report. Safe to call more than once."""

        self._closed = True
        if self._finalizer is not None:
            self._finalizer()

    def __enter__(self) -> Runner:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _spawn(self, command: list[str], *, capture_output: bool) -> int:
        LOGGER.debug("command=%s", format_command(command))
        try:
            completed = run_command(command, cwd=self._cwd, capture_output=capture_output)
        except OSError as exc:
            raise RunnerError(f"The lint command failed with {exc}: `{format_command(command)}`") from exc
        if capture_output:
            self.check_stdout = completed.stdout or ""
            self.check_stderr = completed.stderr or ""
        return completed.returncode

    def _run_for_check(self, paths: Sequence[str]) -> bool:
        returncode = self._spawn(self.command_for_check(paths), capture_output=True)
        self.check_returncode = returncode
        return returncode == 0

    def _run_for_output(self, paths: Sequence[str]) -> None:
        # The output phase exists only for the terminal; its status is not the verdict.
        self._spawn(self.command_for_output(paths), capture_output=False)

    def _notify(self, passed: bool) -> None:
        image: NotificationImage = "success" if passed else "failed"
        self._notifier.notify(summary_text(self.result), title=NOTIFICATION_TITLE, image=image)


__all__ = ["Runner"]
