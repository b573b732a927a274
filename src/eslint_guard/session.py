# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Watcher-style lifecycle around :class:`~eslint_guard.runner.Runner`.

A file watcher calls :meth:`LintSession.start` once, :meth:`LintSession.run_on_changes`
whenever files change, and :meth:`LintSession.run_all` on demand. When
``keep_failed`` is enabled, files that failed the previous run are linted
again alongside the changed files until they pass.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from .config import RunnerConfig
from .core.logging import fail, info
from .errors import RunnerError
from .notifications import Notifier
from .runner import Runner

RunnerFactory = Callable[..., Runner]


def clean_paths(paths: Iterable[str | os.PathLike[str]], *, root: Path) -> list[str]:
    """Return existing ``paths`` without duplicates or entries covered by a listed directory.

    Args:
        paths: Candidate files and directories, relative to ``root`` or absolute.
        root: Directory used to resolve relative entries.

    Returns:
        list[str]: Surviving entries in their original spelling and order.
    """

    resolved: list[tuple[str, Path]] = []
    seen: set[Path] = set()
    for raw in paths:
        text = os.fspath(raw)
        candidate = Path(text)
        absolute = (candidate if candidate.is_absolute() else root / candidate).resolve()
        if absolute in seen or not absolute.exists():
            continue
        seen.add(absolute)
        resolved.append((text, absolute))

    directories = [absolute for _, absolute in resolved if absolute.is_dir()]
    return [
        text
        for text, absolute in resolved
        if not any(directory != absolute and absolute.is_relative_to(directory) for directory in directories)
    ]


class LintSession:
    """Drive successive lint runs and remember which files failed."""

    def __init__(
        self,
        config: RunnerConfig,
        *,
        notifier: Notifier | None = None,
        runner_factory: RunnerFactory = Runner,
        root: Path | None = None,
        use_emoji: bool = True,
    ) -> None:
        self._config = config
        self._notifier = notifier
        self._runner_factory = runner_factory
        self._root = root or Path.cwd()
        self._use_emoji = use_emoji
        self.failed_paths: list[str] = []

    @property
    def config(self) -> RunnerConfig:
        return self._config

    def start(self) -> bool:
        if self._config.all_on_start:
            return self.run_all()
        return True

    def run_all(self) -> bool:
        info("Inspecting all files", use_emoji=self._use_emoji)
        return self._run(list(self._config.default_paths))

    def run_on_changes(self, paths: Sequence[str | os.PathLike[str]]) -> bool:
        """Lint ``paths`` plus, when ``keep_failed`` is set, the files that failed last time.

        Args:
            paths: Changed files reported by the watcher.

        Returns:
            bool: Verdict of the run, or ``True`` when no path remains to lint.
        """

        candidates: list[str | os.PathLike[str]] = []
        if self._config.keep_failed:
            candidates.extend(self.failed_paths)
        candidates.extend(paths)
        targets = clean_paths(candidates, root=self._root)
        if not targets:
            return True
        info(f"Inspecting {', '.join(targets)}", use_emoji=self._use_emoji)
        return self._run(targets)

    def reload(self) -> None:
        self.failed_paths = []

    def _run(self, paths: Sequence[str]) -> bool:
        with self._runner_factory(self._config, notifier=self._notifier, cwd=self._root) as runner:
            try:
                passed = runner.run(paths)
                self.failed_paths = runner.failed_paths() if self._config.keep_failed else []
            except RunnerError as exc:
                fail(f"The following error occurred while running eslint-guard: {exc}", use_emoji=self._use_emoji)
                raise
        return passed


__all__ = ["LintSession", "RunnerFactory", "clean_paths"]
