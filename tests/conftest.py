# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from stanpath.api import get_locator
from stanpath.settings import Settings

MakeInstall = Callable[..., Path]


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point ``HOME`` at a scratch directory and drop stanpath variables."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("CMDSTAN", "STANPATH_RANKING", "STANPATH_NO_EMOJI", "STANPATH_NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    get_locator.cache_clear()
    yield
    get_locator.cache_clear()


@pytest.fixture
def home() -> Path:
    return Path.home()


@pytest.fixture
def install_root(home: Path) -> Path:
    root = home / ".cmdstanr"
    root.mkdir()
    return root


@pytest.fixture
def settings(home: Path) -> Settings:
    return Settings(home=home, use_emoji=False)


@pytest.fixture
def make_install() -> MakeInstall:
    """Return a factory creating fake CmdStan installation directories."""

    def _make(
        root: Path,
        name: str,
        *,
        version: str | None = None,
        makefile: str | None = None,
    ) -> Path:
        directory = root / name
        directory.mkdir(parents=True)
        if makefile is not None:
            (directory / "makefile").write_text(makefile, encoding="utf-8")
        elif version is not None:
            (directory / "makefile").write_text(
                f"# CmdStan makefile\nCMDSTAN_VERSION := {version}\n\nhelp:\n\t@echo help\n",
                encoding="utf-8",
            )
        return directory

    return _make
