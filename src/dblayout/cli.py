"""Command-line entry points for inspecting a store layout."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from dblayout.config import ConfigError, DbLayoutConfig, dump_example_config, load_config
from dblayout.layout import StoreLayout, list_databases, resolve_flat, resolve_from_config, sorted_databases
from dblayout.util.logging import configure_logging
from dblayout.util.paths import FilesystemResolutionError

app = typer.Typer(add_completion=False, help="Store layout inspection CLI")


def _load(config_path: Optional[Path], home: Optional[Path]) -> DbLayoutConfig:
    overrides = {"layout.home": str(home)} if home is not None else None
    try:
        return load_config(config_path, overrides=overrides)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


def _resolve(cfg: DbLayoutConfig, *, flat: bool, logger: logging.Logger) -> StoreLayout:
    try:
        if flat:
            layout = resolve_flat(cfg.layout.home)
        else:
            layout = resolve_from_config(cfg)
    except FilesystemResolutionError as exc:
        logger.error("Layout resolution failed for %s", exc.path)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    logger.debug("Resolved %s", layout)
    return layout


@app.command()
def show(
    home: Optional[Path] = typer.Option(None, help="Home directory (overrides config and DBLAYOUT_HOME)"),
    flat: bool = typer.Option(False, "--flat", help="Collapse data, databases and transaction roots into home"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML/TOML/JSON config file"),
) -> None:
    """Print the resolved roots and derived files."""

    cfg = _load(config, home)
    logger = configure_logging(level=cfg.logging.level, log_path=cfg.logging.log_path)
    layout = _resolve(cfg, flat=flat, logger=logger)

    typer.echo(f"home={layout.home}")
    typer.echo(f"data={layout.data_root}")
    typer.echo(f"databases={layout.databases_root}")
    typer.echo(f"transactions={layout.tx_logs_root}")
    typer.echo(f"scripts={layout.script_root}")
    typer.echo(f"store_lock={layout.store_lock_file}")
    typer.echo(f"server_id={layout.server_id_file}")


@app.command()
def databases(
    home: Optional[Path] = typer.Option(None, help="Home directory (overrides config and DBLAYOUT_HOME)"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML/TOML/JSON config file"),
    by_name: bool = typer.Option(False, "--sorted", help="Sort databases by name"),
) -> None:
    """List the databases present under the databases root."""

    cfg = _load(config, home)
    logger = configure_logging(level=cfg.logging.level, log_path=cfg.logging.log_path)
    layout = _resolve(cfg, flat=False, logger=logger)

    try:
        found = sorted_databases(layout) if by_name else list_databases(layout)
    except FilesystemResolutionError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    if not found:
        logger.info("No databases under %s", layout.databases_root)
    for database in found:
        typer.echo(f"{database.name}\t{database.database_directory}")


@app.command("dump-config")
def dump_config(dest: Path = typer.Argument(..., help="Destination .yaml/.yml/.json file")) -> None:
    """Write the default configuration to DEST."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
