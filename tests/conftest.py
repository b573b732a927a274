# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from subprocess import CompletedProcess
from typing import Any

import pytest


def _report_entry(
    path: str,
    *,
    errors: int = 0,
    warnings: int = 0,
    messages: Sequence[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Return one ``eslint -f json`` file entry."""

    if messages is None:
        messages = [{"ruleId": "no-undef", "severity": 2, "message": "x is not defined"}] * (errors + warnings)
    return {
        "filePath": path,
        "errorCount": errors,
        "warningCount": warnings,
        "fixableErrorCount": 0,
        "fixableWarningCount": 0,
        "messages": list(messages),
        "source": "var a = x;\n",
    }


@dataclass
class FakeEslint:
    """Stand-in for ``run_command`` that writes a JSON report to the ``-o`` path."""

    report: list[dict[str, Any]] | str = field(default_factory=list)
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""
    output_returncode: int = 0
    calls: list[list[str]] = field(default_factory=list)
    captured: list[bool] = field(default_factory=list)
    cwds: list[Path | None] = field(default_factory=list)

    def __call__(self, args, *, cwd=None, capture_output=False, **kwargs):  # noqa: ANN001
        command = list(args)
        self.calls.append(command)
        self.captured.append(capture_output)
        self.cwds.append(cwd)
        if "-o" in command:
            target = Path(command[command.index("-o") + 1])
            payload = self.report if isinstance(self.report, str) else json.dumps(self.report)
            target.write_text(payload, encoding="utf-8")
            return CompletedProcess(args=command, returncode=self.returncode, stdout=self.stdout, stderr=self.stderr)
        return CompletedProcess(args=command, returncode=self.output_returncode, stdout=None, stderr=None)


@dataclass
class RecordingNotifier:
    """Notifier double that records every call."""

    calls: list[tuple[str, str, str]] = field(default_factory=list)

    def notify(self, text: str, *, title: str, image: str) -> None:
        self.calls.append((text, title, image))


@pytest.fixture
def fake_eslint(monkeypatch: pytest.MonkeyPatch) -> FakeEslint:
    """Replace the runner's subprocess entry point with :class:`FakeEslint`."""

    fake = FakeEslint()
    monkeypatch.setattr("eslint_guard.runner.run_command", fake)
    return fake


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def report_entry():  # noqa: ANN201
    """Return a factory building ``eslint -f json`` file entries."""

    return _report_entry
