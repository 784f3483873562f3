# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared CLI helpers: error type, logger adapter and settings loading."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.panel import Panel

from ..console import get_console, status_text
from ..errors import StanPathError
from ..settings import Settings


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around console output respecting CLI emoji settings."""

    console: Console
    use_emoji: bool

    def fail(self, message: str) -> None:
        """Print ``message`` inside a red error panel.

        Args:
            message: Error description; rich markup is not interpreted.
        """

        self.console.print(Panel(status_text("fail", message, use_emoji=self.use_emoji), border_style="red"))

    def warn(self, message: str) -> None:
        """Print ``message`` as a yellow warning line."""

        self.console.print(status_text("warn", message, use_emoji=self.use_emoji))

    def ok(self, message: str) -> None:
        """Print ``message`` as a green success line."""

        self.console.print(status_text("ok", message, use_emoji=self.use_emoji))

    def echo(self, message: str) -> None:
        """Print ``message`` verbatim so scripts can consume it."""

        self.console.print(message, markup=False, emoji=False)


def build_cli_logger(*, emoji: bool, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` writing to the shared stdout console.

    Args:
        emoji: Prefix status lines with emoji markers.
        no_color: Strip ANSI styling from every line.

    Returns:
        CLILogger: Logger bound to the console for these preferences.
    """

    return CLILogger(console=get_console(color=not no_color, emoji=emoji), use_emoji=emoji)


def load_settings() -> Settings:
    """Return settings from the environment, mapping configuration errors to ``CLIError``."""

    try:
        return Settings.from_env()
    except StanPathError as exc:
        raise CLIError(str(exc)) from exc


__all__ = ["CLIError", "CLILogger", "build_cli_logger", "load_settings"]
