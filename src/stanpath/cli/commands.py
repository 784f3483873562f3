# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI commands exposing CmdStan path resolution."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer
from rich import box
from rich.table import Table

from ..discovery import InstallationDiscoverer, ToolchainInstallation
from ..errors import StanPathError
from ..locator import ToolchainLocator
from ..settings import RankingStrategy, Settings
from .shared import CLIError, CLILogger, build_cli_logger, load_settings

PATH_OPTION = Annotated[
    Path | None,
    typer.Option("--path", "-p", help="CmdStan installation to use instead of the discovered one."),
]
ROOT_OPTION = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Install root to scan instead of ~/.cmdstanr."),
]
RANKING_OPTION = Annotated[
    RankingStrategy | None,
    typer.Option("--ranking", case_sensitive=False, help="Ordering used to pick the preferred installation."),
]
NO_ERROR_OPTION = Annotated[
    bool,
    typer.Option("--no-error", help="Print nothing instead of failing when no version is known."),
]


def run_path(path: Path | None = None) -> int:
    """Print the resolved CmdStan path and return an exit status.

    Status messages go to stderr; only the path is written to stdout.

    Args:
        path: Installation to use instead of the startup lookup.

    Returns:
        int: ``0`` on success, ``1`` when no path is configured.
    """

    settings = load_settings()
    logger = build_cli_logger(emoji=settings.use_emoji, no_color=settings.use_color is False)
    try:
        locator = _resolve_locator(settings, path)
        logger.echo(str(locator.path))
    except (CLIError, StanPathError) as exc:
        return _report(logger, exc)
    return 0


def run_version(path: Path | None = None, *, error_if_unresolved: bool = True) -> int:
    """Print the version of the resolved installation and return an exit status.

    Args:
        path: Installation to use instead of the startup lookup.
        error_if_unresolved: Fail when the installation has no known version.

    Returns:
        int: Process exit status.
    """

    settings = load_settings()
    logger = build_cli_logger(emoji=settings.use_emoji, no_color=settings.use_color is False)
    try:
        locator = _resolve_locator(settings, path)
        version = locator.get_version(error_if_unresolved=error_if_unresolved)
    except (CLIError, StanPathError) as exc:
        return _report(logger, exc)
    if version is not None:
        logger.echo(version)
    return 0


def run_discover(root: Path | None = None, *, ranking: RankingStrategy | None = None) -> int:
    """Render installations under the install root in rank order.

    Args:
        root: Install root to scan instead of the configured one.
        ranking: Ordering override.

    Returns:
        int: ``0`` when installations were listed, ``1`` otherwise.
    """

    settings = load_settings()
    logger = build_cli_logger(emoji=settings.use_emoji, no_color=settings.use_color is False)
    discoverer = InstallationDiscoverer.for_settings(settings, root=root)
    if ranking is not None:
        discoverer.ranking = ranking
    try:
        ranked = discoverer.rank()
        preferred = discoverer.preferred()
    except StanPathError as exc:
        return _report(logger, exc)
    if not ranked:
        logger.warn(f"No CmdStan installations found under: {discoverer.root}")
        return 1
    logger.console.print(_build_installations_table(discoverer, ranked, preferred))
    return 0


def run_repair(root: Path | None = None) -> int:
    """Migrate a legacy ``cmdstan`` directory and return an exit status."""

    settings = load_settings()
    logger = build_cli_logger(emoji=settings.use_emoji, no_color=settings.use_color is False)
    discoverer = InstallationDiscoverer.for_settings(settings, root=root)
    try:
        repaired = discoverer.repair_legacy_layout()
    except StanPathError as exc:
        return _report(logger, exc)
    if repaired is None:
        logger.echo(f"No legacy installation to repair under: {discoverer.root}")
    else:
        logger.ok(f"Repaired legacy installation: {repaired}")
    return 0


def run_root() -> int:
    """Print the default install root and return an exit status."""

    settings = load_settings()
    logger = build_cli_logger(emoji=settings.use_emoji, no_color=settings.use_color is False)
    logger.echo(str(settings.install_root))
    return 0


def path_command(path: PATH_OPTION = None) -> None:
    """Print the path of the active CmdStan installation."""

    _exit_with(run_path, path)


def version_command(path: PATH_OPTION = None, no_error: NO_ERROR_OPTION = False) -> None:
    """Print the version of the active CmdStan installation."""

    _exit_with(run_version, path, error_if_unresolved=not no_error)


def root_command() -> None:
    """Print the default install root (whether or not it exists)."""

    _exit_with(run_root)


def discover_command(root: ROOT_OPTION = None, ranking: RANKING_OPTION = None) -> None:
    """List installations under the install root, best first."""

    _exit_with(run_discover, root, ranking=ranking)


def repair_command(root: ROOT_OPTION = None) -> None:
    """Rename a legacy unversioned ``cmdstan`` directory to ``cmdstan-<version>``."""

    _exit_with(run_repair, root)


def register_commands(app: typer.Typer) -> None:
    """Register the built-in commands on ``app``."""

    app.command(name="path")(path_command)
    app.command(name="version")(version_command)
    app.command(name="root")(root_command)
    app.command(name="discover")(discover_command)
    app.command(name="repair")(repair_command)


def _exit_with(runner: Callable[..., int], *args: Any, **kwargs: Any) -> NoReturn:
    """Run ``runner`` and exit with its status, reporting ``CLIError`` first."""

    try:
        exit_code = runner(*args, **kwargs)
    except CLIError as exc:
        exit_code = _report(build_cli_logger(emoji=False), exc)
    raise typer.Exit(code=exit_code)


def _resolve_locator(settings: Settings, path: Path | None) -> ToolchainLocator:
    """Return a configured locator for ``path`` or the startup lookup.

    Raises:
        CLIError: If ``path`` is not an existing directory.
    """

    if path is None:
        return ToolchainLocator.from_environment(settings)
    locator = ToolchainLocator(settings)
    locator.set_path(path)
    if not locator.is_configured:
        raise CLIError(f"Can't find CmdStan directory: {path}")
    return locator


def _build_installations_table(
    discoverer: InstallationDiscoverer,
    ranked: list[ToolchainInstallation],
    preferred: ToolchainInstallation | None,
) -> Table:
    table = Table(
        title=f"CmdStan installations ({discoverer.ranking.value} ranking)",
        box=box.SIMPLE,
        expand=True,
    )
    table.add_column("Rank", justify="right")
    table.add_column("Directory", style="bold")
    table.add_column("Version")
    table.add_column("Notes")
    for index, install in enumerate(ranked, start=1):
        notes: list[str] = []
        if preferred is not None and install.path == preferred.path:
            notes.append("preferred")
        if install.is_release_candidate:
            notes.append("release candidate")
        if install.is_legacy:
            notes.append("legacy layout")
        table.add_row(str(index), install.name, install.version_tag or "-", ", ".join(notes))
    return table


def _report(logger: CLILogger, exc: Exception) -> int:
    logger.fail(str(exc))
    return exc.exit_code if isinstance(exc, CLIError) else 1


__all__ = [
    "register_commands",
    "run_discover",
    "run_path",
    "run_repair",
    "run_root",
    "run_version",
]
