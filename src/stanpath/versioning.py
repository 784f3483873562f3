# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for reading and comparing CmdStan versions."""

from __future__ import annotations

from pathlib import Path

from packaging.version import InvalidVersion, Version

from .console import warn
from .constants import (
    MANIFEST_FILENAME,
    RELEASE_CANDIDATE_MARKER,
    RELEASE_CANDIDATE_PATTERN,
    VERSION_LINE_PATTERN,
)
from .errors import CorruptInstallationError


def read_cmdstan_version(path: Path | str, *, use_emoji: bool = False) -> str | None:
    """Return the version declared in the installation's makefile.

    Args:
        path: CmdStan installation directory.
        use_emoji: Whether the missing-makefile warning may include emoji.

    Returns:
        str | None: Trimmed ``CMDSTAN_VERSION`` value, or ``None`` when the
        makefile does not exist.

    Raises:
        CorruptInstallationError: If the makefile cannot be read or does not
            declare a version.
    """

    install_dir = Path(path)
    makefile = install_dir / MANIFEST_FILENAME
    if not makefile.is_file():
        warn(
            "Can't find CmdStan makefile to detect version number. "
            "Path may not point to valid installation.",
            use_emoji=use_emoji,
        )
        return None
    try:
        lines = makefile.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError as exc:
        raise CorruptInstallationError(install_dir, f"Unable to read CmdStan makefile: {exc}") from exc
    for line in lines:
        match = VERSION_LINE_PATTERN.match(line)
        if match:
            return match.group("value").strip()
    raise CorruptInstallationError(install_dir)


def is_release_candidate(name: Path | str) -> bool:
    """Return ``True`` when ``name`` ends with a ``-rc<N>`` suffix."""

    text = str(name)
    if text.endswith(("/", "\\")):
        text = text[:-1]
    return RELEASE_CANDIDATE_PATTERN.search(text) is not None


def strip_release_candidate(name: str) -> str:
    """Return ``name`` without its release-candidate suffix."""

    return name.split(RELEASE_CANDIDATE_MARKER, 1)[0]


def version_sort_key(tag: str | None) -> Version | None:
    """Parse ``tag`` into a comparable version.

    ``2.23.0-rc1`` normalises to the pre-release ``2.23.0rc1`` which orders
    below ``2.23.0``.

    Returns:
        Version | None: Parsed version, or ``None`` when ``tag`` is not a version.
    """

    if not tag:
        return None
    try:
        return Version(tag)
    except InvalidVersion:
        return None


__all__ = [
    "is_release_candidate",
    "read_cmdstan_version",
    "strip_release_candidate",
    "version_sort_key",
]
