# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Names and patterns describing the on-disk CmdStan layout."""

from __future__ import annotations

import re
from typing import Final

TOOLCHAIN_NAME: Final[str] = "cmdstan"
INSTALL_DIRNAME: Final[str] = ".cmdstanr"
MANIFEST_FILENAME: Final[str] = "makefile"
VERSION_KEY: Final[str] = "CMDSTAN_VERSION"

# Matches "CMDSTAN_VERSION := 2.23.0" and captures the value.
VERSION_LINE_PATTERN: Final[re.Pattern[str]] = re.compile(rf"^{VERSION_KEY} :=(?P<value>.*)$")
RELEASE_CANDIDATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"-rc[0-9]*$")
RELEASE_CANDIDATE_MARKER: Final[str] = "-rc"

PATH_ENV: Final[str] = "CMDSTAN"
HOME_ENV: Final[str] = "HOME"
RANKING_ENV: Final[str] = "STANPATH_RANKING"
NO_EMOJI_ENV: Final[str] = "STANPATH_NO_EMOJI"
NO_COLOR_ENV: Final[str] = "STANPATH_NO_COLOR"

__all__ = [
    "HOME_ENV",
    "INSTALL_DIRNAME",
    "MANIFEST_FILENAME",
    "NO_COLOR_ENV",
    "NO_EMOJI_ENV",
    "PATH_ENV",
    "RANKING_ENV",
    "RELEASE_CANDIDATE_MARKER",
    "RELEASE_CANDIDATE_PATTERN",
    "TOOLCHAIN_NAME",
    "VERSION_KEY",
    "VERSION_LINE_PATTERN",
]
