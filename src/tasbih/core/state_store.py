# -*- coding: utf-8 -*-
"""Counter state with its persistence timing rules.

Toggles are committed the moment they change. The counter is only written by
``flush_counter``, which the shell calls when the app loses focus, so a crash
between taps and the next flush loses the unflushed taps but never a setting.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from tasbih.constants import (
    DEFAULT_COUNT,
    DEFAULT_DARK_MODE,
    DEFAULT_VIBRATION,
    DEFAULT_WAKELOCK,
    HAPTIC_PULSE_MS,
    KEY_COUNT,
    KEY_DARK_MODE,
    KEY_VIBRATION,
    KEY_WAKELOCK,
)
from tasbih.core.haptics import NullVibrator, Vibrator
from tasbih.core.preferences import Preferences
from tasbih.core.state import AppState

logger = logging.getLogger(__name__)

StateListener = Callable[[str, AppState], None]


class StateStore:
    """Own the single AppState and decide when it reaches disk."""

    def __init__(
        self,
        preferences: Preferences,
        vibrator: Vibrator | None = None,
        haptic_pulse_ms: int = HAPTIC_PULSE_MS,
    ) -> None:
        self._preferences = preferences
        self._vibrator = vibrator or NullVibrator()
        self._haptic_pulse_ms = haptic_pulse_ms
        self._listeners: list[StateListener] = []
        self.state = AppState()

    def load(self) -> AppState:
        """Replace the in-memory state with what is on disk, defaults for anything missing."""
        try:
            count = self._preferences.get_int(KEY_COUNT, DEFAULT_COUNT)
            if count < 0:
                logger.warning("Stored counter %d is negative, resetting to %d", count, DEFAULT_COUNT)
                count = DEFAULT_COUNT
            self.state = AppState(
                count=count,
                dark_mode=self._preferences.get_bool(KEY_DARK_MODE, DEFAULT_DARK_MODE),
                vibration_enabled=self._preferences.get_bool(KEY_VIBRATION, DEFAULT_VIBRATION),
                wakelock_enabled=self._preferences.get_bool(KEY_WAKELOCK, DEFAULT_WAKELOCK),
            )
        except Exception:
            logger.exception("Loading preferences failed, starting from defaults")
            self.state = AppState()
        logger.info("Loaded state: %s", self.state)
        return self.state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener(field, state)`` after every mutation. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def increment(self) -> int:
        self.state.count += 1
        if self.state.vibration_enabled:
            try:
                if self._vibrator.has_vibrator():
                    self._vibrator.vibrate(self._haptic_pulse_ms)
            except Exception:
                logger.exception("Haptic feedback failed")
        self._notify("count")
        return self.state.count

    def reset(self) -> int:
        self.state.count = 0
        logger.info("Counter reset")
        self._notify("count")
        return self.state.count

    def toggle_theme(self) -> bool:
        self.state.dark_mode = not self.state.dark_mode
        self._commit_bool(KEY_DARK_MODE, self.state.dark_mode)
        self._notify("dark_mode")
        return self.state.dark_mode

    def toggle_vibration(self) -> bool:
        self.state.vibration_enabled = not self.state.vibration_enabled
        self._commit_bool(KEY_VIBRATION, self.state.vibration_enabled)
        self._notify("vibration_enabled")
        return self.state.vibration_enabled

    def toggle_wakelock(self) -> bool:
        self.state.wakelock_enabled = not self.state.wakelock_enabled
        self._commit_bool(KEY_WAKELOCK, self.state.wakelock_enabled)
        self._notify("wakelock_enabled")
        return self.state.wakelock_enabled

    def flush_counter(self) -> bool:
        """Write the current count. Returns False if the write did not reach disk."""
        try:
            ok = self._preferences.edit().put_int(KEY_COUNT, self.state.count).commit()
        except Exception:
            logger.exception("Flushing counter failed")
            return False
        if ok:
            logger.debug("Counter flushed: %d", self.state.count)
        return ok

    def _commit_bool(self, key: str, value: bool) -> None:
        try:
            ok = self._preferences.edit().put_bool(key, value).commit()
        except Exception:
            logger.exception("Saving %s failed", key)
            return
        if ok:
            logger.info("Saved %s=%s", key, value)
        else:
            logger.warning("%s=%s kept in memory only", key, value)

    def _notify(self, field_name: str) -> None:
        for listener in list(self._listeners):
            try:
                listener(field_name, self.state)
            except Exception:
                logger.exception("State listener failed for %s", field_name)
