# -*- coding: utf-8 -*-
"""Haptic feedback devices."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Vibrator(ABC):
    """Fire-and-forget haptic pulse."""

    @abstractmethod
    def vibrate(self, duration_ms: int) -> None:
        pass

    def has_vibrator(self) -> bool:
        return True


class NullVibrator(Vibrator):
    """No haptic hardware available."""

    def vibrate(self, duration_ms: int) -> None:
        logger.debug("Haptic pulse of %d ms dropped (no device)", duration_ms)

    def has_vibrator(self) -> bool:
        return False


class BeepVibrator(Vibrator):
    """Desktop stand-in for a short pulse: the platform bell."""

    def vibrate(self, duration_ms: int) -> None:
        from PyQt6.QtWidgets import QApplication

        if QApplication.instance() is None:
            return
        QApplication.beep()


def create_vibrator(device: str) -> Vibrator:
    """Return the vibrator configured by ``haptics.device``."""
    if device == "none":
        return NullVibrator()
    return BeepVibrator()
