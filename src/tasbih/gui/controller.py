# -*- coding: utf-8 -*-
"""Maps UI events onto the state store and republishes state as Qt signals."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from tasbih.constants import (
    MSG_COUNTER_RESET,
    MSG_DARK_MODE_ON,
    MSG_LIGHT_MODE_ON,
    MSG_VIBRATION_OFF,
    MSG_VIBRATION_ON,
    MSG_WAKELOCK_OFF,
    MSG_WAKELOCK_ON,
)
from tasbih.core.state import AppState
from tasbih.core.state_store import StateStore

logger = logging.getLogger(__name__)


class AppController(QObject):
    """
    Event entry points for the window.
    Every handler runs on the GUI thread and returns once the store is updated.
    """
    count_changed = pyqtSignal(int)
    theme_changed = pyqtSignal(bool)
    vibration_changed = pyqtSignal(bool)
    wakelock_changed = pyqtSignal(bool)
    notice = pyqtSignal(str)

    def __init__(self, store: StateStore, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.store = store
        store.subscribe(self._on_state_changed)

    @property
    def state(self) -> AppState:
        return self.store.state

    def on_tap_main(self) -> None:
        self.store.increment()

    def on_tap_reset(self) -> None:
        self.store.reset()
        self.notice.emit(MSG_COUNTER_RESET)

    def on_long_press_reset(self) -> None:
        enabled = self.store.toggle_vibration()
        self.notice.emit(MSG_VIBRATION_ON if enabled else MSG_VIBRATION_OFF)

    def on_tap_theme_toggle(self) -> None:
        dark_mode = self.store.toggle_theme()
        self.notice.emit(MSG_DARK_MODE_ON if dark_mode else MSG_LIGHT_MODE_ON)

    def on_app_pause(self) -> None:
        if not self.store.flush_counter():
            logger.warning("Counter %d not saved; it survives only until the app exits", self.state.count)

    def toggle_wakelock(self) -> None:
        # No control is bound to this; kept for the persisted keep-awake flag.
        enabled = self.store.toggle_wakelock()
        self.notice.emit(MSG_WAKELOCK_ON if enabled else MSG_WAKELOCK_OFF)

    def _on_state_changed(self, field_name: str, state: AppState) -> None:
        if field_name == "count":
            self.count_changed.emit(state.count)
        elif field_name == "dark_mode":
            self.theme_changed.emit(state.dark_mode)
        elif field_name == "vibration_enabled":
            self.vibration_changed.emit(state.vibration_enabled)
        elif field_name == "wakelock_enabled":
            self.wakelock_changed.emit(state.wakelock_enabled)
