# SPDX-License-Identifier: MIT
"""Data structures for the ``run`` CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer

from ..notifications import NotifierKind

PATHS_ARGUMENT = Annotated[
    list[str] | None,
    typer.Argument(help="Files or directories to lint. Defaults to the configured default_paths."),
]
ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root holding pyproject.toml / .eslint-guard.toml."),
]
COMMAND_OPTION = Annotated[
    str | None,
    typer.Option("--command", help="Lint executable path or name."),
]
CLI_OPTION = Annotated[
    str | None,
    typer.Option("--cli", help="Extra lint arguments in shell syntax, e.g. \"--max-warnings '0'\"."),
]
FORMATTER_OPTION = Annotated[
    str | None,
    typer.Option("--formatter", "-f", help="Formatter for the human-readable report."),
]
NOTIFICATION_OPTION = Annotated[
    str | None,
    typer.Option("--notification", help="Notification policy: off, on-failure, or always."),
]
NOTIFIER_OPTION = Annotated[
    str,
    typer.Option("--notifier", help="Notification sink: console, desktop, or none."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Log issued commands and report paths."),
]


@dataclass(slots=True)
class RunCLIOptions:
    """Capture CLI options for a single lint run."""

    paths: tuple[str, ...]
    root: Path
    overrides: dict[str, Any]
    notifier: NotifierKind | str
    emoji: bool
    debug: bool

    @classmethod
    def from_cli(
        cls,
        paths: list[str] | None,
        root: Path,
        *,
        command: str | None,
        cli: str | None,
        formatter: str | None,
        notification: str | None,
        notifier: str,
        emoji: bool,
        debug: bool,
    ) -> RunCLIOptions:
        """Return options parsed from CLI arguments; unset flags leave file configuration intact."""

        return cls(
            paths=tuple(paths or ()),
            root=root.resolve(),
            overrides={
                "command": command,
                "cli": cli,
                "formatter": formatter,
                "notification": notification,
            },
            notifier=notifier,
            emoji=emoji,
            debug=debug,
        )


__all__ = [
    "CLI_OPTION",
    "COMMAND_OPTION",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "FORMATTER_OPTION",
    "NOTIFICATION_OPTION",
    "NOTIFIER_OPTION",
    "PATHS_ARGUMENT",
    "ROOT_OPTION",
    "RunCLIOptions",
]
