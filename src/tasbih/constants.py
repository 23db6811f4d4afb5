# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "tasbih-counter"
APP_TITLE = "Tasbih"
APP_VERSION = "1.0.0"

DEFAULT_SETTINGS_FILE = "settings.json"

# Preferences namespace and keys. Changing any of these orphans existing user data.
PREFS_NAME = "TasbihPrefs"
KEY_COUNT = "counter"
KEY_DARK_MODE = "dark_mode"
KEY_VIBRATION = "vibration"
KEY_WAKELOCK = "wakelock"

DEFAULT_COUNT = 0
DEFAULT_DARK_MODE = False
DEFAULT_VIBRATION = True
DEFAULT_WAKELOCK = False

HAPTIC_PULSE_MS = 20
LONG_PRESS_MS = 500

MSG_COUNTER_RESET = "Counter reset"
MSG_VIBRATION_ON = "Vibration enabled"
MSG_VIBRATION_OFF = "Vibration disabled"
MSG_DARK_MODE_ON = "Dark mode enabled"
MSG_LIGHT_MODE_ON = "Light mode enabled"
MSG_WAKELOCK_ON = "Screen will stay on"
MSG_WAKELOCK_OFF = "Screen can turn off"

NOTICE_TIMEOUT_MS = 2000
