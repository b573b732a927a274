# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Models describing the per-file JSON report produced by ``eslint -f json``."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, NonNegativeInt, RootModel, ValidationError, field_validator
from pydantic.alias_generators import to_camel, to_snake

from .errors import ResultParseError


class FileResult(BaseModel):
    """Findings reported for a single linted file.

    JSON keys arrive in camelCase (``filePath``, ``errorCount``). Message
    objects are otherwise opaque; only their top-level keys are normalised to
    snake_case so ``ruleId`` is read back as ``rule_id``.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    file_path: str
    error_count: NonNegativeInt
    warning_count: NonNegativeInt
    fixable_error_count: NonNegativeInt = 0
    fixable_warning_count: NonNegativeInt = 0
    messages: tuple[dict[str, Any], ...] = ()

    @field_validator("messages", mode="before")
    @classmethod
    def _normalise_message_keys(cls, value: object) -> object:
        if not isinstance(value, (list, tuple)):
            return value
        return tuple(
            {to_snake(str(key)): item for key, item in message.items()} if isinstance(message, Mapping) else message
            for message in value
        )

    @property
    def failed(self) -> bool:
        return bool(self.messages)


class LintResult(RootModel[tuple[FileResult, ...]]):
    """Ordered, immutable sequence of :class:`FileResult` entries for one run."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[FileResult]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> FileResult:
        return self.root[index]

    @property
    def files(self) -> tuple[FileResult, ...]:
        return self.root

    @property
    def error_count(self) -> int:
        return sum(entry.error_count for entry in self.root)

    @property
    def warning_count(self) -> int:
        return sum(entry.warning_count for entry in self.root)

    def failed_paths(self) -> list[str]:
        """Return paths of files carrying at least one message, in report order."""

        return [entry.file_path for entry in self.root if entry.failed]


def parse_lint_result(payload: str | bytes, *, stdout: str = "", stderr: str = "") -> LintResult:
    """Validate ``payload`` into a :class:`LintResult`.

    Args:
        payload: Raw JSON document written by the lint tool.
        stdout: Captured stdout of the run that produced ``payload``.
        stderr: Captured stderr of the run that produced ``payload``.

    Returns:
        LintResult: Parsed report.

    Raises:
        ResultParseError: Raised when ``payload`` is empty, malformed, or does
            not match the report schema. The captured streams are attached
            because a broken report almost always means the tool itself failed.
    """

    try:
        return LintResult.model_validate_json(payload)
    except ValidationError as exc:
        errors = exc.errors()
        detail = errors[0]["msg"] if errors else "invalid report"
        raise ResultParseError(detail, stdout=stdout, stderr=stderr) from exc


__all__ = ["FileResult", "LintResult", "parse_lint_result"]
