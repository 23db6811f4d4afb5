# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any

from PyQt6.QtCore import QCoreApplication, QStandardPaths

from tasbih.constants import APP_NAME, DEFAULT_SETTINGS_FILE, HAPTIC_PULSE_MS, LONG_PRESS_MS, NOTICE_TIMEOUT_MS
from tasbih.utils.file_utils import read_json_file, write_json_file

logger = logging.getLogger(__name__)

HAPTIC_DEVICES = ("auto", "beep", "none")

DEFAULT_CONFIG: dict[str, Any] = {
    "storage": {"data_dir": ""},
    "haptics": {"device": "auto", "pulse_ms": HAPTIC_PULSE_MS},
    "ui": {"long_press_ms": LONG_PRESS_MS, "notice_timeout_ms": NOTICE_TIMEOUT_MS},
    "logging": {"dir": ""},
}


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load a simple .env file (KEY=VALUE)."""
    values: dict[str, str] = {}
    if not env_path.exists():
        return values

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        values[key] = value
    return values


def _apply_env_overrides(config: dict[str, Any], env_values: dict[str, str]) -> dict[str, Any]:
    """Apply environment-based overrides to runtime config."""
    merged = deepcopy(config)
    data_dir = env_values.get("TASBIH_DATA_DIR", "").strip()
    haptic_ms = env_values.get("TASBIH_HAPTIC_MS", "").strip()

    if data_dir:
        merged.setdefault("storage", {})
        merged["storage"]["data_dir"] = data_dir
    if haptic_ms:
        try:
            merged.setdefault("haptics", {})
            merged["haptics"]["pulse_ms"] = int(haptic_ms)
        except ValueError:
            logger.warning("Ignoring non-numeric TASBIH_HAPTIC_MS=%r", haptic_ms)
    return merged


def _collect_env(config_path: Path) -> dict[str, str]:
    # Process environment wins over the .env file.
    env_path = config_path.parent / ".env"
    try:
        values = _load_env_file(env_path)
    except (OSError, ValueError) as exc:
        logger.warning("Could not read %s, using process environment only: %s", env_path, exc)
        values = {}
    for key in ("TASBIH_DATA_DIR", "TASBIH_HAPTIC_MS"):
        if key in os.environ:
            values[key] = os.environ[key]
    return values


def _check_int(name: str, value: Any, low: int, high: int) -> None:
    # bool is an int subclass and never a valid duration
    if isinstance(value, bool) or not isinstance(value, int) or not (low <= value <= high):
        raise ConfigError(f"{name} must be an int in range {low}..{high}")


def _validate_storage(section: dict[str, Any]) -> None:
    if not isinstance(section.get("data_dir"), str):
        raise ConfigError("storage.data_dir must be a string")


def _validate_haptics(section: dict[str, Any]) -> None:
    if section.get("device") not in HAPTIC_DEVICES:
        raise ConfigError(f"haptics.device must be one of {', '.join(HAPTIC_DEVICES)}")
    _check_int("haptics.pulse_ms", section.get("pulse_ms"), 1, 1000)


def _validate_ui(section: dict[str, Any]) -> None:
    _check_int("ui.long_press_ms", section.get("long_press_ms"), 100, 5000)
    _check_int("ui.notice_timeout_ms", section.get("notice_timeout_ms"), 0, 60000)


def _validate_logging(section: dict[str, Any]) -> None:
    if not isinstance(section.get("dir"), str):
        raise ConfigError("logging.dir must be a string")


_SECTION_VALIDATORS = {
    "storage": _validate_storage,
    "haptics": _validate_haptics,
    "ui": _validate_ui,
    "logging": _validate_logging,
}


def _validate_section(config: dict[str, Any], name: str) -> None:
    section = config.get(name)
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be an object")
    _SECTION_VALIDATORS[name](section)


def validate_config(config: dict[str, Any]) -> None:
    """Validate the config fields the app relies on."""
    for name in _SECTION_VALIDATORS:
        _validate_section(config, name)


def _repair_sections(config: dict[str, Any], source: Path) -> dict[str, Any]:
    """Replace each invalid section with its defaults, keeping the valid ones."""
    repaired = deepcopy(config)
    for name in _SECTION_VALIDATORS:
        try:
            _validate_section(repaired, name)
        except ConfigError as exc:
            logger.warning("Invalid settings in %s, using defaults for %r: %s", source, name, exc)
            repaired[name] = deepcopy(DEFAULT_CONFIG[name])
    return repaired


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults.

    A broken settings file never keeps the counter from starting. Unreadable
    files are logged and ignored; an invalid section falls back to its defaults
    while the other sections, including ``storage.data_dir``, are kept.
    """
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = _collect_env(config_path)
    try:
        loaded = read_json_file(config_path) if config_path.exists() else {}
    except (OSError, ValueError) as exc:
        logger.warning("Could not read settings %s, using defaults: %s", config_path, exc)
        loaded = {}

    merged = _repair_sections(_deep_merge(get_default_config(), loaded), config_path)
    merged = _apply_env_overrides(merged, env_values)
    return _repair_sections(merged, config_path)


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    write_json_file(config_path, config)
    return config_path


def default_data_dir() -> Path:
    """Per-user app data location, e.g. ~/.local/share/tasbih-counter on Linux or %APPDATA%\\tasbih-counter on Windows."""
    if QCoreApplication.applicationName() != APP_NAME:
        QCoreApplication.setApplicationName(APP_NAME)
    location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    if not location:
        home = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.HomeLocation)
        return Path(home) / f".{APP_NAME}"
    return Path(location)


def resolve_data_dir(config: dict[str, Any]) -> Path:
    """Return the directory holding the preferences namespace."""
    configured = str(config.get("storage", {}).get("data_dir", "")).strip()
    if configured:
        return Path(configured).expanduser()
    return default_data_dir()
