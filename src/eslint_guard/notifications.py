# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Notification sinks that receive the summary of a lint run."""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final, Literal, Protocol, runtime_checkable

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .config import ConfigError
from .core.logging import get_console, warn
from .process_utils import format_command, run_command

LOGGER = logging.getLogger(__name__)

NotificationImage = Literal["success", "failed"]
NotifierKind = Literal["console", "desktop", "none"]

NOTIFICATION_TITLE: Final[str] = "ESLint results"
DEFAULT_NOTIFY_COMMAND: Final[str] = "notify-send"
_DESKTOP_ICONS: Final[Mapping[str, str]] = {
    "success": "dialog-information",
    "failed": "dialog-error",
}
_PANEL_STYLES: Final[Mapping[str, str]] = {
    "success": "green",
    "failed": "red",
}


@runtime_checkable
class Notifier(Protocol):
    """Protocol describing a fire-and-forget notification sink."""

    __slots__ = ()

    @abstractmethod
    def notify(self, text: str, *, title: str, image: NotificationImage) -> None:
        """Deliver ``text`` under ``title`` with an icon chosen by ``image``.

        Args:
            text: Summary body.
            title: Notification heading.
            image: ``"success"`` or ``"failed"``.
        """


class NullNotifier:
    """Discard every notification."""

    def notify(self, text: str, *, title: str, image: NotificationImage) -> None:
        del text, title, image


@dataclass(slots=True)
class ConsoleNotifier:
    """Render notifications as a Rich panel on the terminal."""

    console: Console = field(default_factory=get_console)

    def notify(self, text: str, *, title: str, image: NotificationImage) -> None:
        self.console.print(
            Panel(Text(text), title=title, border_style=_PANEL_STYLES[image], expand=False),
        )


@dataclass(slots=True)
class CommandNotifier:
    """Send notifications through a desktop command such as ``notify-send``.

    A missing or failing command never fails the lint run; it is reported as a
    warning instead.
    """

    command: str = DEFAULT_NOTIFY_COMMAND
    use_emoji: bool = True

    def build_command(self, text: str, *, title: str, image: NotificationImage) -> list[str]:
        return [self.command, "--icon", _DESKTOP_ICONS[image], title, text]

    def notify(self, text: str, *, title: str, image: NotificationImage) -> None:
        args = self.build_command(text, title=title, image=image)
        LOGGER.debug("notify command=%s", format_command(args))
        try:
            completed = run_command(args, capture_output=True, discard_stdin=True)
        except OSError as exc:
            warn(f"Desktop notification skipped: {exc}", use_emoji=self.use_emoji)
            return
        if completed.returncode != 0:
            detail = (completed.stderr or "").strip() or f"exit status {completed.returncode}"
            warn(f"Desktop notification failed: {detail}", use_emoji=self.use_emoji)


def build_notifier(kind: str, *, use_emoji: bool = True) -> Notifier:
    """Return the notifier registered under ``kind``.

    Args:
        kind: One of ``"console"``, ``"desktop"``, or ``"none"``.
        use_emoji: Emoji preference for warnings emitted by the notifier.

    Returns:
        Notifier: Notifier instance.

    Raises:
        ConfigError: Raised when ``kind`` is unknown.
    """

    if kind == "console":
        return ConsoleNotifier()
    if kind == "desktop":
        return CommandNotifier(use_emoji=use_emoji)
    if kind == "none":
        return NullNotifier()
    raise ConfigError(f"Unknown notifier '{kind}'; expected console, desktop, or none")


__all__ = [
    "NOTIFICATION_TITLE",
    "CommandNotifier",
    "ConsoleNotifier",
    "NotificationImage",
    "Notifier",
    "NotifierKind",
    "NullNotifier",
    "build_notifier",
]
