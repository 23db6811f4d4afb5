# -*- coding: utf-8 -*-
"""Tappable counter surface."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget


class CounterWidget(QFrame):
    """Large count display. A left click released inside the surface counts as a tap."""

    tapped = pyqtSignal()

    def __init__(self, count: int = 0, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("counterSurface")
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        self.counter_label = QLabel(str(count))
        self.counter_label.setObjectName("counterText")
        self.counter_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.subtle_label = QLabel("tap to count")
        self.subtle_label.setObjectName("subtleLabel")
        self.subtle_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.addStretch(1)
        layout.addWidget(self.counter_label)
        layout.addWidget(self.subtle_label)
        layout.addStretch(1)

    def set_count(self, count: int) -> None:
        self.counter_label.setText(str(count))

    def mousePressEvent(self, event: QMouseEvent) -> None:
        # Accepting the press is what routes the matching release here.
        if event.button() == Qt.MouseButton.LeftButton:
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton and self.rect().contains(event.position().toPoint()):
            self.tapped.emit()
            event.accept()
            return
        super().mouseReleaseEvent(event)
