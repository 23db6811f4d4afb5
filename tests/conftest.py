# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from tasbih.core.haptics import Vibrator  # noqa: E402
from tasbih.core.preferences import Preferences  # noqa: E402
from tasbih.core.state_store import StateStore  # noqa: E402


class RecordingVibrator(Vibrator):
    def __init__(self) -> None:
        self.calls: list[int] = []

    def vibrate(self, duration_ms: int) -> None:
        self.calls.append(duration_ms)


@pytest.fixture(scope="session")
def qt_app():
    pytest.importorskip("PyQt6")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def prefs_dir(tmp_path: Path) -> Path:
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def prefs(prefs_dir: Path) -> Preferences:
    return Preferences.open(prefs_dir)


@pytest.fixture
def write_prefs(prefs: Preferences):
    def _write(data: dict) -> Path:
        prefs.path.write_text(json.dumps(data), encoding="utf-8")
        return prefs.path

    return _write


@pytest.fixture
def vibrator() -> RecordingVibrator:
    return RecordingVibrator()


@pytest.fixture
def store(prefs: Preferences, vibrator: RecordingVibrator) -> StateStore:
    state_store = StateStore(prefs, vibrator=vibrator)
    state_store.load()
    return state_store


@pytest.fixture
def reload(prefs: Preferences):
    """Simulate a fresh launch reading the same namespace."""

    def _reload():
        return StateStore(Preferences(prefs.path)).load()

    return _reload


@pytest.fixture
def default_config() -> dict:
    from tasbih.config import get_default_config

    return get_default_config()
