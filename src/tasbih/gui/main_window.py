# -*- coding: utf-8 -*-
"""Main counter window."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent, QKeySequence, QShortcut
from PyQt6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from tasbih.constants import APP_TITLE, APP_VERSION, LONG_PRESS_MS, NOTICE_TIMEOUT_MS
from tasbih.gui.controller import AppController
from tasbih.gui.controls_widget import ControlsWidget
from tasbih.gui.counter_widget import CounterWidget
from tasbih.gui.theme import build_stylesheet

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Counter surface plus reset/theme controls; renders whatever the controller publishes."""

    def __init__(
        self,
        controller: AppController,
        settings: dict[str, Any] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.settings = settings or {}
        ui_settings = self.settings.get("ui", {})
        self._long_press_ms = int(ui_settings.get("long_press_ms", LONG_PRESS_MS))
        self._notice_timeout_ms = int(ui_settings.get("notice_timeout_ms", NOTICE_TIMEOUT_MS))
        self.keep_screen_on = False

        self.setWindowTitle(f"{APP_TITLE} v{APP_VERSION}")
        self.resize(420, 720)

        self.controller.count_changed.connect(self._on_count_changed)
        self.controller.theme_changed.connect(self._on_theme_changed)
        self.controller.wakelock_changed.connect(self._apply_wakelock)
        self.controller.notice.connect(self.show_notice)

        self._render()
        self._apply_wakelock(self.controller.state.wakelock_enabled)
        self._bind_hotkeys()

    def _render(self) -> None:
        """Build the whole visual tree from the current state, replacing any previous one."""
        state = self.controller.state
        self.setStyleSheet(build_stylesheet(state.dark_mode))

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.counter_widget = CounterWidget(count=state.count)
        self.counter_widget.tapped.connect(self.controller.on_tap_main)
        self.controls_widget = ControlsWidget(dark_mode=state.dark_mode, long_press_ms=self._long_press_ms)
        self.controls_widget.reset_requested.connect(self.controller.on_tap_reset)
        self.controls_widget.vibration_toggle_requested.connect(self.controller.on_long_press_reset)
        self.controls_widget.theme_toggle_requested.connect(self.controller.on_tap_theme_toggle)

        layout.addWidget(self.counter_widget, 1)
        layout.addWidget(self.controls_widget)
        # setCentralWidget deletes the previous tree.
        self.setCentralWidget(central)

    def _bind_hotkeys(self) -> None:
        self._shortcuts: list[QShortcut] = []
        for sequence in (Qt.Key.Key_Space, Qt.Key.Key_Return):
            shortcut = QShortcut(QKeySequence(sequence), self)
            shortcut.activated.connect(self.controller.on_tap_main)
            self._shortcuts.append(shortcut)

    def _on_count_changed(self, count: int) -> None:
        self.counter_widget.set_count(count)

    def _on_theme_changed(self, dark_mode: bool) -> None:
        logger.info("Theme changed (dark_mode=%s), rebuilding window", dark_mode)
        self._render()

    def _apply_wakelock(self, enabled: bool) -> None:
        # Desktop has no per-window keep-awake flag; the shell only records it.
        self.keep_screen_on = enabled
        self.setProperty("keepScreenOn", enabled)
        logger.info("Keep screen on: %s", enabled)

    def show_notice(self, message: str) -> None:
        self.statusBar().showMessage(message, self._notice_timeout_ms)

    def handle_application_state(self, state: Qt.ApplicationState) -> None:
        """Flush the counter whenever the app stops being the active one."""
        if state != Qt.ApplicationState.ApplicationActive:
            self.controller.on_app_pause()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.controller.on_app_pause()
        super().closeEvent(event)
