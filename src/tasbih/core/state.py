# -*- coding: utf-8 -*-
"""Application state container."""

from __future__ import annotations

from dataclasses import dataclass

from tasbih.constants import DEFAULT_COUNT, DEFAULT_DARK_MODE, DEFAULT_VIBRATION, DEFAULT_WAKELOCK


@dataclass
class AppState:
    """Counter value and user toggles shared by GUI components."""

    count: int = DEFAULT_COUNT
    dark_mode: bool = DEFAULT_DARK_MODE
    vibration_enabled: bool = DEFAULT_VIBRATION
    wakelock_enabled: bool = DEFAULT_WAKELOCK
