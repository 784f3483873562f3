# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised while locating CmdStan installations."""

from __future__ import annotations

from pathlib import Path


class StanPathError(Exception):
    """Base class for failures surfaced by :mod:`stanpath`."""


class ConfigError(StanPathError):
    """Raised when configuration input is invalid."""


class NotConfiguredError(StanPathError):
    """Raised when a CmdStan path is required but none has been set."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "CmdStan path has not been set yet. See set_cmdstan_path().")


class CorruptInstallationError(StanPathError):
    """Raised when an installation's makefile exists but cannot yield a version.

    Attributes:
        path: Installation directory whose manifest is broken.
    """

    def __init__(self, path: Path, message: str = "CmdStan makefile is missing a version number.") -> None:
        super().__init__(f"{message} ({path})")
        self.path = path


__all__ = [
    "ConfigError",
    "CorruptInstallationError",
    "NotConfiguredError",
    "StanPathError",
]
