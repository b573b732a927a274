# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing status messages rendered through a shared Rich console."""

from __future__ import annotations

from functools import lru_cache
from typing import Final

from rich.console import Console
from rich.text import Text

_STYLES: Final[dict[str, str]] = {
    "info": "cyan",
    "ok": "bold green",
    "warn": "bold yellow",
    "fail": "bold red",
}
_GLYPHS: Final[dict[str, str]] = {
    "info": "ℹ️ ",
    "ok": "✅ ",
    "warn": "⚠️ ",
    "fail": "❌ ",
}


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Return the process-wide console used for status messages.

    Returns:
        Console: Console writing to whatever ``sys.stdout`` is at print time.
    """

    return Console(highlight=False, soft_wrap=True)


def emoji(sym: str, enable: bool) -> str:
    return sym if enable else ""


def _emit(kind: str, msg: str, *, use_emoji: bool) -> None:
    line = Text(emoji(_GLYPHS[kind], use_emoji))
    line.append(msg, style=_STYLES[kind])
    get_console().print(line)


def info(msg: str, *, use_emoji: bool) -> None:
    _emit("info", msg, use_emoji=use_emoji)


def ok(msg: str, *, use_emoji: bool) -> None:
    _emit("ok", msg, use_emoji=use_emoji)


def warn(msg: str, *, use_emoji: bool) -> None:
    _emit("warn", msg, use_emoji=use_emoji)


def fail(msg: str, *, use_emoji: bool) -> None:
    _emit("fail", msg, use_emoji=use_emoji)


__all__ = ["emoji", "fail", "get_console", "info", "ok", "warn"]
