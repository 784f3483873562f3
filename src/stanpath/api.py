# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process-wide CmdStan path functions backed by a shared :class:`ToolchainLocator`.

The shared locator is created on first use, at which point ``CMDSTAN`` or the
default install root is consulted once. It carries no locking; use a
dedicated :class:`ToolchainLocator` per thread when that matters.

:func:`cmdstan_default_install_path` and :func:`cmdstan_default_path` read
the environment on every call and never touch the shared locator.
"""

from __future__ import annotations

from functools import cache
from pathlib import Path

from .discovery import default_install_root, default_preferred_path
from .locator import ToolchainLocator
from .settings import Settings


@cache
def get_locator() -> ToolchainLocator:
    """Return the process-wide locator, creating it from the environment on first use."""

    return ToolchainLocator.from_environment()


def set_cmdstan_path(path: Path | str | None = None) -> Path | str | None:
    """Set the CmdStan installation used for this process.

    Args:
        path: Installation directory. ``None`` selects the installation that
            :func:`cmdstan_default_path` reports.

    Returns:
        Path | str | None: The path that was attempted.

    Raises:
        CorruptInstallationError: If the target's makefile declares no version.
    """

    return get_locator().set_path(path)


def cmdstan_path() -> Path:
    """Return the configured CmdStan path or raise :class:`NotConfiguredError`."""

    return get_locator().path


def cmdstan_version(error_on_na: bool = True) -> str | None:
    """Return the version of the configured installation.

    Args:
        error_on_na: Raise :class:`NotConfiguredError` instead of returning
            ``None`` when no version is known.

    Returns:
        str | None: Version string such as ``"2.23.0"``.
    """

    return get_locator().get_version(error_if_unresolved=error_on_na)


def cmdstan_default_install_path() -> Path:
    """Return ``$HOME/.cmdstanr`` for the current environment.

    Returns:
        Path: Install root, whether or not it exists.
    """

    return default_install_root(settings=Settings.from_env())


def cmdstan_default_path() -> Path | None:
    """Return the preferred installation under the current install root.

    A legacy ``cmdstan`` directory is migrated first.

    Returns:
        Path | None: Preferred installation, or ``None`` when there is none.
    """

    return default_preferred_path(settings=Settings.from_env())


def cmdstan_tempdir() -> Path | None:
    """Return the scratch directory recorded on the shared locator."""

    return get_locator().scratch_dir


def unset_cmdstan_path() -> None:
    """Forget the configured path and version (used by tests)."""

    get_locator().reset()


__all__ = [
    "cmdstan_default_install_path",
    "cmdstan_default_path",
    "cmdstan_path",
    "cmdstan_tempdir",
    "cmdstan_version",
    "get_locator",
    "set_cmdstan_path",
    "unset_cmdstan_path",
]
