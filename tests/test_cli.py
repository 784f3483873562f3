# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the stanpath command line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from stanpath.cli import app

runner = CliRunner()


def test_root_command_prints_install_root(home: Path) -> None:
    result = runner.invoke(app, ["root"])

    assert result.exit_code == 0
    assert result.stdout.strip() == str(home / ".cmdstanr")


def test_path_command_fails_when_nothing_installed() -> None:
    result = runner.invoke(app, ["path"])

    assert result.exit_code == 1
    assert "has not been set yet" in result.stdout


def test_path_command_prints_only_the_path_on_stdout(install_root: Path, make_install) -> None:
    make_install(install_root, "cmdstan-2.23.0", version="2.23.0")

    result = runner.invoke(app, ["path"])

    assert result.exit_code == 0
    assert result.stdout == f"{(install_root / 'cmdstan-2.23.0').resolve()}\n"
    assert "CmdStan path set to:" in result.stderr


def test_version_command_prints_only_the_version_on_stdout(install_root: Path, make_install) -> None:
    make_install(install_root, "cmdstan-2.23.0", version="2.23.0")

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert result.stdout == "2.23.0\n"


def test_path_command_with_missing_directory(tmp_path: Path) -> None:
    result = runner.invoke(app, ["path", "--path", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "Can't find" in result.stdout


def test_version_command(tmp_path: Path, make_install) -> None:
    install = make_install(tmp_path, "cmdstan-2.26.0", version="2.26.0")

    result = runner.invoke(app, ["version", "--path", str(install)])

    assert result.exit_code == 0
    assert result.stdout.strip() == "2.26.0"


def test_version_command_without_makefile(tmp_path: Path, make_install) -> None:
    install = make_install(tmp_path, "custom")

    strict = runner.invoke(app, ["version", "--path", str(install)])
    lenient = runner.invoke(app, ["version", "--path", str(install), "--no-error"])

    assert strict.exit_code == 1
    assert lenient.exit_code == 0


def test_version_command_reports_corrupt_makefile(tmp_path: Path, make_install) -> None:
    install = make_install(tmp_path, "cmdstan-2.26.0", makefile="all:\n")

    result = runner.invoke(app, ["version", "--path", str(install)])

    assert result.exit_code == 1
    assert "missing a version number" in result.stdout


def test_discover_command_lists_ranked_installs(install_root: Path, make_install) -> None:
    make_install(install_root, "cmdstan-2.9.0")
    make_install(install_root, "cmdstan-2.10.0")

    result = runner.invoke(app, ["discover", "--ranking", "lexicographic"])

    assert result.exit_code == 0
    assert "lexicographic ranking" in result.stdout
    assert result.stdout.index("cmdstan-2.9.0") < result.stdout.index("cmdstan-2.10.0")
    assert "preferred" in result.stdout


def test_discover_command_does_not_repair(install_root: Path, make_install) -> None:
    make_install(install_root, "cmdstan", version="2.20.0")

    result = runner.invoke(app, ["discover"])

    assert result.exit_code == 0
    assert "legacy layout" in result.stdout
    assert (install_root / "cmdstan").is_dir()


def test_discover_command_with_empty_root(tmp_path: Path) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()

    result = runner.invoke(app, ["discover", "--root", str(empty)])

    assert result.exit_code == 1
    assert "No CmdStan installations found" in result.stdout


def test_repair_command(install_root: Path, make_install) -> None:
    make_install(install_root, "cmdstan", version="2.20.0")

    first = runner.invoke(app, ["repair"])
    second = runner.invoke(app, ["repair"])

    assert first.exit_code == 0
    assert "Repaired legacy installation" in first.stdout
    assert (install_root / "cmdstan-2.20.0").is_dir()
    assert second.exit_code == 0
    assert "No legacy installation to repair" in second.stdout


def test_invalid_ranking_variable_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STANPATH_RANKING", "newest")

    result = runner.invoke(app, ["root"])

    assert result.exit_code == 1
    assert "Unknown ranking strategy" in result.stdout
