# -*- coding: utf-8 -*-
"""Reset and theme controls."""

from __future__ import annotations

from PyQt6.QtCore import QTimer, pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from tasbih.constants import LONG_PRESS_MS
from tasbih.gui.theme import theme_toggle_label


class LongPressButton(QPushButton):
    """Push button telling a short tap apart from a press held past ``long_press_ms``.

    A long press emits ``long_pressed`` while the button is still held and
    swallows the click that follows the release.
    """

    tapped = pyqtSignal()
    long_pressed = pyqtSignal()

    def __init__(self, text: str = "", long_press_ms: int = LONG_PRESS_MS, parent: QWidget | None = None) -> None:
        super().__init__(text, parent)
        self._long_press_fired = False
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(long_press_ms)
        self._timer.timeout.connect(self._on_long_press_timeout)
        self.pressed.connect(self._on_pressed)
        self.released.connect(self._timer.stop)
        self.clicked.connect(self._on_clicked)

    def _on_pressed(self) -> None:
        self._long_press_fired = False
        self._timer.start()

    def _on_long_press_timeout(self) -> None:
        self._long_press_fired = True
        self.long_pressed.emit()

    def _on_clicked(self) -> None:
        if self._long_press_fired:
            self._long_press_fired = False
            return
        self.tapped.emit()


class ControlsWidget(QWidget):
    """Reset button (tap resets, long press toggles vibration) and theme toggle."""

    reset_requested = pyqtSignal()
    vibration_toggle_requested = pyqtSignal()
    theme_toggle_requested = pyqtSignal()

    def __init__(
        self,
        dark_mode: bool = False,
        long_press_ms: int = LONG_PRESS_MS,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 8, 16, 16)
        layout.setSpacing(8)

        self.reset_button = LongPressButton("↺", long_press_ms=long_press_ms)
        self.reset_button.setObjectName("iconButton")
        self.reset_button.setToolTip("Tap to reset the counter. Hold to turn vibration on or off.")
        self.reset_button.tapped.connect(self.reset_requested.emit)
        self.reset_button.long_pressed.connect(self.vibration_toggle_requested.emit)

        self.mode_toggle_button = QPushButton(theme_toggle_label(dark_mode))
        self.mode_toggle_button.setObjectName("iconButton")
        self.mode_toggle_button.setToolTip("Switch between light and dark mode.")
        self.mode_toggle_button.clicked.connect(self.theme_toggle_requested.emit)

        layout.addWidget(self.reset_button)
        layout.addStretch(1)
        layout.addWidget(self.mode_toggle_button)
