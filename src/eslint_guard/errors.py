# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while running the lint tool."""

from __future__ import annotations


class RunnerError(RuntimeError):
    """Raised when a lint run cannot proceed (spawn failure, reuse, use after close)."""


class ResultParseError(RunnerError):
    """Raised when the JSON report cannot be parsed; carries the check-phase output."""

    def __init__(self, detail: str, *, stdout: str, stderr: str) -> None:
        super().__init__(
            f"eslint JSON output could not be parsed ({detail}). Output from eslint was:\n{stderr}\n{stdout}",
        )
        self.stdout = stdout
        self.stderr = stderr


__all__ = ["ResultParseError", "RunnerError"]
