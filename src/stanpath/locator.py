# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve, validate and cache the active CmdStan installation."""

from __future__ import annotations

from pathlib import Path

from .console import info, warn
from .discovery import default_install_root, default_preferred_path
from .errors import CorruptInstallationError, NotConfiguredError
from .settings import Settings
from .state import PathState
from .versioning import read_cmdstan_version


class ToolchainLocator:
    """Own the active CmdStan path and version for one logical session.

    Instances are not synchronised; share one across threads only if callers
    serialise access themselves.
    """

    def __init__(self, settings: Settings | None = None, *, state: PathState | None = None) -> None:
        self.settings = settings if settings is not None else Settings.from_env()
        self._state = state if state is not None else PathState()

    @classmethod
    def from_environment(cls, settings: Settings | None = None) -> ToolchainLocator:
        """Create a locator and run the startup lookup once.

        ``CMDSTAN`` wins when set. Otherwise, if the install root exists, the
        preferred installation beneath it is selected (migrating a legacy
        ``cmdstan`` directory first). Missing or corrupt installations only
        produce warnings; the locator is returned unconfigured so callers can
        still call :meth:`set_path` themselves.

        Args:
            settings: Settings to use; read from the environment when omitted.

        Returns:
            ToolchainLocator: Locator after the startup lookup.
        """

        settings = settings if settings is not None else Settings.from_env()
        locator = cls(settings)
        try:
            if settings.path_override is not None:
                locator.set_path(settings.path_override)
            elif settings.install_root.is_dir():
                locator.set_path()
        except CorruptInstallationError as exc:
            warn(f"Path not set. {exc}", use_emoji=settings.use_emoji, use_color=settings.use_color)
        return locator

    @property
    def is_configured(self) -> bool:
        """Return ``True`` once a path has been set successfully."""

        return self._state.is_configured

    def set_path(self, path: Path | str | None = None) -> Path | str | None:
        """Point the locator at ``path`` or, when omitted, the preferred default.

        A path that is not an existing directory, including the empty string,
        leaves the current configuration untouched and only emits a warning.

        Args:
            path: Installation directory to use.

        Returns:
            Path | str | None: The path that was attempted (absolute on
            success, the empty string unchanged), or ``None`` when no default
            installation could be found.

        Raises:
            CorruptInstallationError: If the installation's makefile exists but
                declares no version.
        """

        if path is None:
            path = self.default_preferred_path()
            if path is None:
                warn(
                    f"Path not set. No CmdStan installation found under: {self.default_install_root()}",
                    use_emoji=self.settings.use_emoji,
                    use_color=self.settings.use_color,
                )
                return None
        if isinstance(path, str) and not path.strip():
            # Path("") would silently become the working directory.
            warn(
                f"Path not set. Can't find directory: {path!r}",
                use_emoji=self.settings.use_emoji,
                use_color=self.settings.use_color,
            )
            return path
        candidate = Path(path).expanduser()
        if not candidate.is_dir():
            warn(
                f"Path not set. Can't find directory: {candidate}",
                use_emoji=self.settings.use_emoji,
                use_color=self.settings.use_color,
            )
            return candidate
        resolved = candidate.resolve()
        version = read_cmdstan_version(resolved, use_emoji=self.settings.use_emoji)
        self._state.configure(resolved, version)
        info(
            f"CmdStan path set to: {resolved}",
            use_emoji=self.settings.use_emoji,
            use_color=self.settings.use_color,
        )
        return resolved

    @property
    def path(self) -> Path:
        """Return the active installation path.

        Raises:
            NotConfiguredError: If no path has been set.
        """

        current = self._state.current_path
        if current is None:
            raise NotConfiguredError()
        if self._state.current_version is None:
            self._state.current_version = read_cmdstan_version(current, use_emoji=self.settings.use_emoji)
        return current

    def get_path(self) -> Path:
        """Return the active installation path.

        Returns:
            Path: Absolute installation directory.

        Raises:
            NotConfiguredError: If no path has been set.
        """

        return self.path

    def get_version(self, error_if_unresolved: bool = True) -> str | None:
        """Return the cached CmdStan version.

        Args:
            error_if_unresolved: Raise instead of returning ``None`` when no
                version is known.

        Raises:
            NotConfiguredError: If no version is cached and
                ``error_if_unresolved`` is true.
        """

        version = self._state.current_version
        if version is None and error_if_unresolved:
            raise NotConfiguredError()
        return version

    def default_install_root(self) -> Path:
        """Return the install root for this locator's settings.

        Returns:
            Path: ``<home>/.cmdstanr``, whether or not it exists.
        """

        return default_install_root(settings=self.settings)

    def default_preferred_path(self) -> Path | None:
        """Return the preferred installation under the install root.

        A legacy ``cmdstan`` directory is migrated before ranking.

        Returns:
            Path | None: Preferred installation, or ``None`` when the root is
            missing or empty.
        """

        return default_preferred_path(settings=self.settings)

    @property
    def scratch_dir(self) -> Path | None:
        """Return the session temporary directory, if a collaborator set one."""

        return self._state.scratch_dir

    def set_scratch_dir(self, path: Path | str | None) -> None:
        """Record the session temporary directory managed by the caller.

        Args:
            path: Directory to record, or ``None`` to forget it.
        """

        self._state.scratch_dir = Path(path) if path is not None else None

    def reset(self) -> None:
        """Return to the unconfigured state. Intended for tests and diagnostics."""

        self._state.clear()


__all__ = ["ToolchainLocator"]
