# -*- coding: utf-8 -*-
"""Durable key-value preferences backed by a single JSON file per namespace."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from tasbih.constants import PREFS_NAME
from tasbih.utils.file_utils import read_json_file, write_json_file_atomic

logger = logging.getLogger(__name__)

_REMOVED = object()


class Preferences:
    """Typed reads over a JSON object on disk.

    Every read goes back to the file so a fresh ``Preferences`` over the same
    path sees exactly what the last successful commit wrote. Reads never raise:
    a missing, unreadable or corrupt file, or a value of the wrong type, yields
    the caller's default.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @classmethod
    def open(cls, data_dir: str | Path, name: str = PREFS_NAME) -> "Preferences":
        return cls(Path(data_dir) / f"{name}.json")

    def get_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            return read_json_file(self.path)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read preferences %s: %s", self.path, exc)
            return {}

    def get_int(self, key: str, default: int) -> int:
        value = self.get_all().get(key, default)
        # bool is an int subclass but never a valid stored counter
        if isinstance(value, bool) or not isinstance(value, int):
            logger.debug("Preference %r has non-int value %r, using default", key, value)
            return default
        return value

    def get_bool(self, key: str, default: bool) -> bool:
        value = self.get_all().get(key, default)
        if not isinstance(value, bool):
            logger.debug("Preference %r has non-bool value %r, using default", key, value)
            return default
        return value

    def edit(self) -> "PreferencesEditor":
        return PreferencesEditor(self)


class PreferencesEditor:
    """Collects changes and writes them in one atomic commit."""

    def __init__(self, preferences: Preferences) -> None:
        self._preferences = preferences
        self._pending: dict[str, Any] = {}
        self._clear = False

    def put_int(self, key: str, value: int) -> "PreferencesEditor":
        self._pending[key] = int(value)
        return self

    def put_bool(self, key: str, value: bool) -> "PreferencesEditor":
        self._pending[key] = bool(value)
        return self

    def remove(self, key: str) -> "PreferencesEditor":
        self._pending[key] = _REMOVED
        return self

    def clear(self) -> "PreferencesEditor":
        self._clear = True
        return self

    def commit(self) -> bool:
        """Write pending changes synchronously. Returns False if the write failed."""
        data = {} if self._clear else self._preferences.get_all()
        for key, value in self._pending.items():
            if value is _REMOVED:
                data.pop(key, None)
            else:
                data[key] = value
        try:
            write_json_file_atomic(self._preferences.path, data)
        except OSError as exc:
            logger.warning("Could not write preferences %s: %s", self._preferences.path, exc)
            return False
        self._pending.clear()
        self._clear = False
        return True
