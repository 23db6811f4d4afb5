# -*- coding: utf-8 -*-
"""CLI commands for the persisted counter preferences."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from tasbih.config import ConfigError, get_default_config, load_config, resolve_data_dir, save_config
from tasbih.constants import DEFAULT_SETTINGS_FILE, PREFS_NAME
from tasbih.core.preferences import Preferences
from tasbih.core.state_store import StateStore

app = typer.Typer(help="Inspect or clear the tasbih counter preferences, or write a settings file")
logger = logging.getLogger(__name__)


def _open_preferences(data_dir: Path | None, settings_file: Path | None) -> Preferences:
    if data_dir is None:
        data_dir = resolve_data_dir(load_config(settings_file))
    return Preferences.open(data_dir, PREFS_NAME)


@app.command()
def show(
    data_dir: Path = typer.Option(None, help="Directory holding TasbihPrefs.json"),
    settings_file: Path = typer.Option(None, help="Settings JSON (default: settings.json)"),
    verbose: bool = typer.Option(False, help="Verbose output"),
) -> None:
    """Print the state the app would start with."""
    if verbose:
        logging.basicConfig(level=logging.INFO)

    preferences = _open_preferences(data_dir, settings_file)
    state = StateStore(preferences).load()

    typer.echo(f"Preferences: {preferences.path}")
    typer.echo(f"  counter:   {state.count}")
    typer.echo(f"  dark_mode: {state.dark_mode}")
    typer.echo(f"  vibration: {state.vibration_enabled}")
    typer.echo(f"  wakelock:  {state.wakelock_enabled}")


@app.command()
def clear(
    data_dir: Path = typer.Option(None, help="Directory holding TasbihPrefs.json"),
    settings_file: Path = typer.Option(None, help="Settings JSON (default: settings.json)"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Remove every stored value so the next launch starts from defaults."""
    preferences = _open_preferences(data_dir, settings_file)
    if not yes:
        typer.confirm(f"Clear all values in {preferences.path}?", abort=True)

    if not preferences.edit().clear().commit():
        typer.echo(f"Could not write {preferences.path}", err=True)
        raise typer.Exit(code=1)
    typer.echo("Preferences cleared")


@app.command("init-config")
def init_config(
    settings_file: Path = typer.Option(Path(DEFAULT_SETTINGS_FILE), help="Settings JSON to write"),
    data_dir: Path = typer.Option(None, help="Store TasbihPrefs.json here instead of the app data folder"),
    haptics: str = typer.Option("auto", help="Haptic device: auto, beep or none"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing settings file"),
) -> None:
    """Write a settings file with the default values."""
    if settings_file.exists() and not force:
        typer.echo(f"{settings_file} already exists, use --force to overwrite", err=True)
        raise typer.Exit(code=1)

    config = get_default_config()
    config["haptics"]["device"] = haptics
    if data_dir is not None:
        config["storage"]["data_dir"] = str(data_dir)
    try:
        written = save_config(config, settings_file)
    except ConfigError as exc:
        typer.echo(f"Invalid setting: {exc}", err=True)
        raise typer.Exit(code=2)
    except OSError as exc:
        typer.echo(f"Could not write {settings_file}: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Settings written to {written}")


if __name__ == "__main__":
    app()
