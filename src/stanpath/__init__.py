# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate, validate and cache the CmdStan toolchain installation."""

from __future__ import annotations

from .api import (
    cmdstan_default_install_path,
    cmdstan_default_path,
    cmdstan_path,
    cmdstan_tempdir,
    cmdstan_version,
    get_locator,
    set_cmdstan_path,
    unset_cmdstan_path,
)
from .discovery import (
    InstallationDiscoverer,
    ToolchainInstallation,
    default_install_root,
    default_preferred_path,
)
from .errors import ConfigError, CorruptInstallationError, NotConfiguredError, StanPathError
from .locator import ToolchainLocator
from .settings import RankingStrategy, Settings
from .state import PathState
from .versioning import is_release_candidate, read_cmdstan_version

__all__ = [
    "ConfigError",
    "CorruptInstallationError",
    "InstallationDiscoverer",
    "NotConfiguredError",
    "PathState",
    "RankingStrategy",
    "Settings",
    "StanPathError",
    "ToolchainInstallation",
    "ToolchainLocator",
    "cmdstan_default_install_path",
    "cmdstan_default_path",
    "cmdstan_path",
    "cmdstan_tempdir",
    "cmdstan_version",
    "default_install_root",
    "default_preferred_path",
    "get_locator",
    "is_release_candidate",
    "read_cmdstan_version",
    "set_cmdstan_path",
    "unset_cmdstan_path",
]
