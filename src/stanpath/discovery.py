# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discover CmdStan installations beneath the default install root.

Installations live in ``<home>/.cmdstanr`` as ``cmdstan-<version>`` directories,
optionally suffixed with ``-rc<N>`` for release candidates. Older installers
wrote a bare ``cmdstan`` directory; :meth:`InstallationDiscoverer.repair_legacy_layout`
migrates that layout to the versioned naming scheme. Every other operation in
this module is read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from packaging.version import Version

from .console import info, warn
from .constants import TOOLCHAIN_NAME
from .settings import RankingStrategy, Settings
from .versioning import (
    is_release_candidate,
    read_cmdstan_version,
    strip_release_candidate,
    version_sort_key,
)


@dataclass(frozen=True, slots=True)
class ToolchainInstallation:
    """Directory discovered under the install root."""

    path: Path
    version_tag: str | None
    toolchain_name: str = TOOLCHAIN_NAME

    @property
    def name(self) -> str:
        """Return the directory name, e.g. ``cmdstan-2.23.0``."""

        return self.path.name

    @property
    def is_release_candidate(self) -> bool:
        """Return ``True`` when the directory name ends in ``-rc<N>``."""

        return is_release_candidate(self.name)

    @property
    def is_legacy(self) -> bool:
        """Return ``True`` for the unversioned ``cmdstan`` directory."""

        return self.name == self.toolchain_name

    @property
    def stable_name(self) -> str:
        """Return the directory name without its release-candidate suffix."""

        return strip_release_candidate(self.name)

    @property
    def sort_key(self) -> Version | None:
        """Return the parsed version used by semantic ranking, if the tag parses."""

        return version_sort_key(self.version_tag)


class InstallationDiscoverer:
    """Rank installations found in ``root`` and select the preferred one."""

    def __init__(
        self,
        root: Path,
        *,
        toolchain_name: str = TOOLCHAIN_NAME,
        ranking: RankingStrategy = RankingStrategy.SEMANTIC,
        use_emoji: bool = False,
    ) -> None:
        self.root = Path(root)
        self.toolchain_name = toolchain_name
        self.ranking = ranking
        self.use_emoji = use_emoji

    @classmethod
    def for_settings(cls, settings: Settings, *, root: Path | None = None) -> InstallationDiscoverer:
        """Return a discoverer configured from ``settings``."""

        return cls(
            root if root is not None else settings.install_root,
            toolchain_name=settings.toolchain_name,
            ranking=settings.ranking,
            use_emoji=settings.use_emoji,
        )

    @property
    def legacy_path(self) -> Path:
        """Return the location of an unversioned ``cmdstan`` directory."""

        return self.root / self.toolchain_name

    def installations(self) -> list[ToolchainInstallation]:
        """Return the immediate subdirectories of the root, sorted by name.

        Raises:
            CorruptInstallationError: If an unrepaired legacy directory has a
                makefile without a version.
        """

        if not self.root.is_dir():
            return []
        found = [
            ToolchainInstallation(
                path=entry,
                version_tag=self._version_tag(entry),
                toolchain_name=self.toolchain_name,
            )
            for entry in self.root.iterdir()
            if entry.is_dir()
        ]
        return sorted(found, key=lambda item: item.name)

    def rank(self) -> list[ToolchainInstallation]:
        """Return installations ordered best first according to :attr:`ranking`."""

        installs = self.installations()
        if self.ranking is RankingStrategy.LEXICOGRAPHIC:
            return sorted(installs, key=lambda item: item.name, reverse=True)
        versioned = [item for item in installs if item.sort_key is not None]
        unversioned = [item for item in installs if item.sort_key is None]
        versioned.sort(key=lambda item: (item.sort_key, item.name), reverse=True)
        unversioned.sort(key=lambda item: item.name, reverse=True)
        return versioned + unversioned

    def preferred(self) -> ToolchainInstallation | None:
        """Return the installation callers should use, or ``None`` when the root is empty.

        A release candidate is only passed over when the matching stable
        directory (same name without ``-rc<N>``) is also installed.
        """

        ranked = self.rank()
        if not ranked:
            return None
        candidate = ranked[0]
        if candidate.is_release_candidate:
            stable_name = candidate.stable_name
            for item in ranked:
                if item.name == stable_name:
                    return item
        return candidate

    def preferred_path(self) -> Path | None:
        """Return the path of :meth:`preferred`.

        Returns:
            Path | None: Preferred installation directory, or ``None`` when
            the root holds no installations.
        """

        preferred = self.preferred()
        return preferred.path if preferred is not None else None

    def repair_legacy_layout(self) -> Path | None:
        """Rename a bare ``cmdstan`` directory to ``cmdstan-<version>``.

        Returns:
            Path | None: New installation path, or ``None`` when nothing was
            migrated.

        Raises:
            CorruptInstallationError: If the legacy makefile lacks a version.
        """

        legacy = self.legacy_path
        if not legacy.is_dir():
            return None
        version = read_cmdstan_version(legacy, use_emoji=self.use_emoji)
        if not version:
            warn(
                f"Legacy CmdStan directory {legacy} has no detectable version; leaving it in place.",
                use_emoji=self.use_emoji,
            )
            return None
        target = self.root / f"{self.toolchain_name}-{version}"
        if target.exists():
            warn(
                f"Cannot move legacy CmdStan directory {legacy}: {target} already exists.",
                use_emoji=self.use_emoji,
            )
            return None
        try:
            legacy.rename(target)
        except OSError as exc:
            warn(f"Failed to move legacy CmdStan directory {legacy}: {exc}", use_emoji=self.use_emoji)
            return None
        info(f"Moved legacy CmdStan installation to: {target}", use_emoji=self.use_emoji)
        return target

    def _version_tag(self, entry: Path) -> str | None:
        prefix = f"{self.toolchain_name}-"
        if entry.name.startswith(prefix):
            return entry.name[len(prefix) :] or None
        if entry.name == self.toolchain_name:
            return read_cmdstan_version(entry, use_emoji=self.use_emoji)
        return None


def default_install_root(home: Path | str | None = None, *, settings: Settings | None = None) -> Path:
    """Return ``<home>/.cmdstanr`` regardless of whether it exists.

    Args:
        home: Home directory to use instead of the configured one.
        settings: Settings supplying the home directory and folder name.
    """

    settings = settings if settings is not None else Settings.from_env()
    if home is not None:
        return Path(home).expanduser() / settings.install_dirname
    return settings.install_root


def default_preferred_path(
    root: Path | None = None,
    *,
    repair_legacy: bool = True,
    ranking: RankingStrategy | None = None,
    settings: Settings | None = None,
) -> Path | None:
    """Return the path of the preferred installation under the install root.

    Args:
        root: Install root to scan instead of the configured default.
        repair_legacy: Migrate a bare ``cmdstan`` directory before ranking.
        ranking: Ordering override; defaults to the configured strategy.
        settings: Settings used for defaults.

    Returns:
        Path | None: Preferred installation directory, or ``None`` when none
        exists.
    """

    settings = settings if settings is not None else Settings.from_env()
    discoverer = InstallationDiscoverer.for_settings(settings, root=root)
    if ranking is not None:
        discoverer.ranking = ranking
    if repair_legacy:
        discoverer.repair_legacy_layout()
    return discoverer.preferred_path()


__all__ = [
    "InstallationDiscoverer",
    "ToolchainInstallation",
    "default_install_root",
    "default_preferred_path",
]
