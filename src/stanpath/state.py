# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Mutable state tracking the active CmdStan installation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class PathState:
    """Active installation path, its cached version, and the session scratch directory.

    The version is only ever written together with the path it was read
    from, so a cached version never outlives a path change.
    """

    current_path: Path | None = None
    current_version: str | None = None
    scratch_dir: Path | None = None

    @property
    def is_configured(self) -> bool:
        return self.current_path is not None

    def configure(self, path: Path, version: str | None) -> None:
        self.current_path = path
        self.current_version = version

    def clear(self) -> None:
        """Forget the path and version; the scratch directory is kept."""

        self.current_path = None
        self.current_version = None


__all__ = ["PathState"]
