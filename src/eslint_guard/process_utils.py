# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution for lint tool invocations."""

from __future__ import annotations

import shlex
import shutil

# Bandit: subprocess usage is intentional; we provide a controlled wrapper around
# lint tool execution, normalising arguments and disabling ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    # Bandit: type-only import of subprocess metadata is part of the safe wrapper.
    from subprocess import CompletedProcess as _CompletedProcess  # nosec B404


def _normalize_args(args: Sequence[str], cwd: Path | None = None) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]
    if cwd is not None and len(head_path.parts) > 1:
        # node_modules/.bin/eslint and similar resolve against the child's cwd.
        head = str(cwd / head_path)

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def format_command(args: Sequence[str]) -> str:
    """Return ``args`` rendered as a copy-pasteable shell command line."""

    return shlex.join(str(arg) for arg in args)


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    capture_output: bool = False,
    discard_stdin: bool = False,
) -> _CompletedProcess[str]:
    """Execute *args* after normalising the executable path.

    The exit status is never checked here; callers decide what a non-zero
    status means. When ``capture_output`` is ``False`` the child inherits the
    parent's stdout and stderr.

    Args:
        args: Command line whose first element names the executable.
        cwd: Optional working directory for the child process.
        capture_output: Capture stdout and stderr separately when ``True``.
        discard_stdin: Attach the child's stdin to ``/dev/null``.

    Returns:
        CompletedProcess[str]: Completed process including the exit status.

    Raises:
        FileNotFoundError: Raised when the executable cannot be located.
        OSError: Raised when the operating system refuses to spawn the child.
    """

    normalized = _normalize_args(args, cwd)

    # Bandit: commands originate from user configuration; we pass argument
    # lists directly without shell expansion.
    completed: _CompletedProcess[str] = subprocess.run(  # nosec B603
        normalized,
        cwd=str(cwd) if cwd is not None else None,
        check=False,
        capture_output=capture_output,
        text=True,
        stdin=subprocess.DEVNULL if discard_stdin else None,
    )
    return completed


__all__ = ["format_command", "run_command"]
