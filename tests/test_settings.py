# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from stanpath.errors import ConfigError
from stanpath.settings import RankingStrategy, Settings


def test_from_env_defaults(tmp_path: Path) -> None:
    settings = Settings.from_env({"HOME": str(tmp_path)})

    assert settings.home == tmp_path
    assert settings.install_root == tmp_path / ".cmdstanr"
    assert settings.path_override is None
    assert settings.ranking is RankingStrategy.SEMANTIC
    assert settings.use_emoji is True
    assert settings.use_color is None


def test_from_env_reads_overrides(tmp_path: Path) -> None:
    settings = Settings.from_env(
        {
            "HOME": str(tmp_path),
            "CMDSTAN": str(tmp_path / "cmdstan-2.23.0"),
            "STANPATH_RANKING": "Lexicographic",
            "STANPATH_NO_EMOJI": "1",
            "STANPATH_NO_COLOR": "yes",
        }
    )

    assert settings.path_override == tmp_path / "cmdstan-2.23.0"
    assert settings.ranking is RankingStrategy.LEXICOGRAPHIC
    assert settings.use_emoji is False
    assert settings.use_color is False


def test_empty_cmdstan_variable_is_ignored(tmp_path: Path) -> None:
    settings = Settings.from_env({"HOME": str(tmp_path), "CMDSTAN": ""})

    assert settings.path_override is None


def test_from_env_falls_back_to_process_environment(home: Path) -> None:
    assert Settings.from_env().home == home


def test_unknown_ranking_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Unknown ranking strategy"):
        Settings.from_env({"HOME": str(tmp_path), "STANPATH_RANKING": "newest"})


def test_settings_are_frozen(tmp_path: Path) -> None:
    settings = Settings(home=tmp_path)

    with pytest.raises(ValidationError):
        settings.home = tmp_path / "other"  # type: ignore[misc]
