# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Aggregate counts and human-readable summary text for a lint run."""

from __future__ import annotations

from dataclasses import dataclass

from .results import LintResult


def pluralize(count: int, noun: str, *, no_for_zero: bool = False) -> str:
    """Return ``"<count> <noun>"`` with an ``s`` suffix unless ``count`` is exactly one.

    Args:
        count: Number of items.
        noun: Singular noun.
        no_for_zero: Render ``"no"`` instead of ``"0"`` when ``count`` is zero.

    Returns:
        str: Rendered phrase such as ``"1 file"`` or ``"no warnings"``.
    """

    number = "no" if count == 0 and no_for_zero else str(count)
    suffix = "" if count == 1 else "s"
    return f"{number} {noun}{suffix}"


@dataclass(frozen=True, slots=True)
class LintSummary:
    """Totals across every file in a :class:`LintResult`."""

    files_inspected: int
    errors: int
    warnings: int

    @classmethod
    def from_result(cls, result: LintResult) -> LintSummary:
        return cls(
            files_inspected=len(result),
            errors=result.error_count,
            warnings=result.warning_count,
        )

    def render(self) -> str:
        return (
            f"{pluralize(self.files_inspected, 'file')} inspected, "
            f"{pluralize(self.errors, 'error', no_for_zero=True)} detected, "
            f"{pluralize(self.warnings, 'warning', no_for_zero=True)} detected"
        )


def summary_text(result: LintResult) -> str:
    return LintSummary.from_result(result).render()


__all__ = ["LintSummary", "pluralize", "summary_text"]
