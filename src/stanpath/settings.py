# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime configuration for CmdStan discovery."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import (
    HOME_ENV,
    INSTALL_DIRNAME,
    NO_COLOR_ENV,
    NO_EMOJI_ENV,
    PATH_ENV,
    RANKING_ENV,
    TOOLCHAIN_NAME,
)
from .errors import ConfigError

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


class RankingStrategy(str, Enum):
    """Enumerate the orderings used to pick the preferred installation."""

    SEMANTIC = "semantic"
    LEXICOGRAPHIC = "lexicographic"

    @classmethod
    def from_raw(cls, raw: str) -> RankingStrategy:
        """Return the strategy named by ``raw`` (case-insensitive).

        Raises:
            ConfigError: If ``raw`` does not name a strategy.
        """

        normalized = raw.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        choices = ", ".join(member.value for member in cls)
        raise ConfigError(f"Unknown ranking strategy '{raw}'; expected one of: {choices}")


class Settings(BaseModel):
    """Describe where installations live and how results are presented."""

    model_config = ConfigDict(frozen=True)

    home: Path = Field(default_factory=Path.home)
    install_dirname: str = INSTALL_DIRNAME
    toolchain_name: str = TOOLCHAIN_NAME
    path_override: Path | None = None
    ranking: RankingStrategy = RankingStrategy.SEMANTIC
    use_emoji: bool = True
    use_color: bool | None = None

    @property
    def install_root(self) -> Path:
        """Return the directory the installer writes CmdStan releases into."""

        return self.home / self.install_dirname

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of :data:`os.environ`.

        Returns:
            Settings: Configuration reflecting the environment.

        Raises:
            ConfigError: If a variable holds an invalid value.
        """

        env = os.environ if environ is None else environ
        home_value = env.get(HOME_ENV)
        home = Path(home_value).expanduser() if home_value else Path.home()
        override = env.get(PATH_ENV) or None
        ranking_raw = env.get(RANKING_ENV)
        ranking = RankingStrategy.from_raw(ranking_raw) if ranking_raw else RankingStrategy.SEMANTIC
        try:
            return cls(
                home=home,
                path_override=Path(override).expanduser() if override else None,
                ranking=ranking,
                use_emoji=not _is_truthy(env.get(NO_EMOJI_ENV)),
                use_color=False if _is_truthy(env.get(NO_COLOR_ENV)) else None,
            )
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc


def _is_truthy(value: str | None) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


__all__ = ["RankingStrategy", "Settings"]
