# -*- coding: utf-8 -*-
"""Tests for session logging and the crash report hook."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

pytest.importorskip("PyQt6")

from tasbih.config import load_config
from tasbih.utils.logger import hold_startup_records, setup_session_logging


@pytest.fixture
def fresh_root_logger(monkeypatch):
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    monkeypatch.delenv("TASBIH_DEBUG", raising=False)
    for attr in ("_tasbih_logging_configured", "_tasbih_session_log"):
        if hasattr(root, attr):
            monkeypatch.delattr(root, attr)
    yield root
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
    for attr in ("_tasbih_logging_configured", "_tasbih_session_log"):
        if hasattr(root, attr):
            delattr(root, attr)


def test_session_log_created_under_base_dir(fresh_root_logger, tmp_path: Path) -> None:
    log_path = setup_session_logging(tmp_path, "Tasbih Counter")
    assert log_path is not None
    assert log_path.parent == tmp_path / "logs"
    assert log_path.name.startswith("tasbih-counter-")


def test_config_warnings_reach_session_log(fresh_root_logger, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("TASBIH_DATA_DIR", raising=False)
    monkeypatch.delenv("TASBIH_HAPTIC_MS", raising=False)
    settings_file = tmp_path / "settings.json"
    settings_file.write_text('{"ui": {"long_press_ms": 50}}', encoding="utf-8")

    with hold_startup_records() as startup_records:
        load_config(settings_file)
    log_path = setup_session_logging(tmp_path, "tasbih-counter", replay=startup_records.buffer)

    for handler in fresh_root_logger.handlers:
        handler.flush()
    text = log_path.read_text(encoding="utf-8")
    assert "ui.long_press_ms" in text
    assert "WARNING" in text


def test_startup_buffer_detaches_from_root(fresh_root_logger) -> None:
    with hold_startup_records() as startup_records:
        pass
    assert startup_records not in fresh_root_logger.handlers


def test_crash_report_written_to_configured_dir(tmp_path: Path, monkeypatch) -> None:
    from tasbih import main as main_module

    monkeypatch.chdir(tmp_path)
    dialogs: list[str] = []
    chained: list[str] = []
    monkeypatch.setattr(main_module.QMessageBox, "critical", lambda parent, title, text: dialogs.append(text))
    monkeypatch.setattr(sys, "__excepthook__", lambda *exc_info: chained.append(exc_info[0].__name__))

    handler = main_module.make_exception_handler(tmp_path / "custom")
    try:
        raise RuntimeError("counter exploded")
    except RuntimeError:
        handler(*sys.exc_info())

    crash_file = tmp_path / "custom" / "logs" / "LAST_CRASH.log"
    assert "counter exploded" in crash_file.read_text(encoding="utf-8")
    assert chained == ["RuntimeError"]
    assert not (tmp_path / "logs").exists()
    assert all(str(crash_file) in text for text in dialogs)
