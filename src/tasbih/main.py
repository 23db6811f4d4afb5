# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

from PyQt6.QtWidgets import QApplication, QMessageBox

from tasbih.config import load_config, resolve_data_dir
from tasbih.constants import APP_NAME, APP_TITLE, HAPTIC_PULSE_MS
from tasbih.core.haptics import create_vibrator
from tasbih.core.preferences import Preferences
from tasbih.core.state_store import StateStore
from tasbih.gui.controller import AppController
from tasbih.gui.main_window import MainWindow
from tasbih.utils.logger import hold_startup_records, setup_session_logging


def make_exception_handler(base_dir: str | Path):
    """Return an excepthook that logs fatal errors and keeps the last one in ``<base_dir>/logs``."""
    crash_path = Path(base_dir) / "logs" / "LAST_CRASH.log"

    def global_exception_handler(exc_type, exc_value, exc_traceback):
        error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
        logging.getLogger().critical("FATAL CRASH:\n%s", error_msg)

        try:
            crash_path.parent.mkdir(parents=True, exist_ok=True)
            crash_path.write_text(error_msg, encoding="utf-8")
        except OSError as exc:
            logging.getLogger().error("Could not write crash report: %s", exc)

        if QApplication.instance():
            QMessageBox.critical(None, "Application Crash", f"A fatal error occurred.\nDetails saved to: {crash_path}")

        sys.__excepthook__(exc_type, exc_value, exc_traceback)

    return global_exception_handler


def build_window(settings: dict) -> MainWindow:
    """Load persisted state and assemble the controller and window around it."""
    data_dir = resolve_data_dir(settings)
    preferences = Preferences.open(data_dir)
    haptics = settings.get("haptics", {})
    store = StateStore(
        preferences,
        vibrator=create_vibrator(str(haptics.get("device", "auto"))),
        haptic_pulse_ms=int(haptics.get("pulse_ms", HAPTIC_PULSE_MS)),
    )
    # State must be loaded before the first render so the theme is right from the start.
    store.load()
    controller = AppController(store)
    return MainWindow(controller, settings=settings)


def main() -> int:
    """Start the GUI application."""
    sys.excepthook = make_exception_handler(Path.cwd())
    with hold_startup_records() as startup_records:
        settings = load_config()
    log_base = settings["logging"]["dir"] or Path.cwd()
    sys.excepthook = make_exception_handler(log_base)
    session_log_path = setup_session_logging(log_base, APP_NAME, replay=startup_records.buffer)
    logger = logging.getLogger(__name__)
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(APP_TITLE)

    window = build_window(settings)
    app.applicationStateChanged.connect(window.handle_application_state)
    app.aboutToQuit.connect(window.controller.on_app_pause)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
