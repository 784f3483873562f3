# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Status output for stanpath.

Every status line (path changes, missing installations, legacy migrations)
goes to stderr so that the values printed by the CLI stay alone on stdout.
"""

from __future__ import annotations

import sys
from functools import cache
from typing import Final, Literal

from rich.console import Console
from rich.text import Text

Level = Literal["info", "warn", "ok", "fail"]

_MARKERS: Final[dict[Level, tuple[str, str]]] = {
    "info": ("ℹ️ ", "cyan"),
    "warn": ("⚠️ ", "yellow"),
    "ok": ("✅ ", "green"),
    "fail": ("❌ ", "red"),
}


def stream_is_tty(*, stderr: bool) -> bool:
    """Return ``True`` when the target stream is attached to a terminal."""

    stream = sys.stderr if stderr else sys.stdout
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@cache
def get_console(*, stderr: bool = False, color: bool = True, emoji: bool = True) -> Console:
    """Return the shared console for one stream and output preference.

    Args:
        stderr: Write to standard error instead of standard output.
        color: Allow ANSI styling. Colour is still dropped when the stream is
            not a terminal.
        emoji: Let rich render ``:name:`` emoji codes.

    Returns:
        Console: Console cached per ``(stderr, color, emoji)``.
    """

    return Console(
        stderr=stderr,
        no_color=not color,
        emoji=emoji,
        highlight=False,
        soft_wrap=True,
    )


def status_text(level: Level, msg: str, *, use_emoji: bool, styled: bool = True) -> Text:
    """Build the rich text for one status line.

    Args:
        level: Severity that selects the emoji marker and style.
        msg: Message body. Markup is not interpreted.
        use_emoji: Prefix the level's emoji marker.
        styled: Apply the level's colour.

    Returns:
        Text: Renderable status line.
    """

    marker, style = _MARKERS[level]
    text = Text(f"{marker if use_emoji else ''}{msg}")
    if styled:
        text.stylize(style)
    return text


def _emit(level: Level, msg: str, *, use_emoji: bool, use_color: bool | None) -> None:
    color = stream_is_tty(stderr=True) if use_color is None else use_color
    console = get_console(stderr=True, color=color, emoji=use_emoji)
    console.print(status_text(level, msg, use_emoji=use_emoji, styled=color))


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report a state change such as a newly configured path."""

    _emit("info", msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report a recoverable problem (PathNotFound, InvalidInstallation)."""

    _emit("warn", msg, use_emoji=use_emoji, use_color=use_color)


__all__ = ["Level", "get_console", "info", "status_text", "stream_is_tty", "warn"]
