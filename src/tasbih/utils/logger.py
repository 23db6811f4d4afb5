# -*- coding: utf-8 -*-
"""Root logging setup: console plus one log file per session."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from datetime import datetime
from logging.handlers import MemoryHandler
from pathlib import Path


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def setup_session_logging(
    base_dir: str | Path,
    app_name: str,
    replay: Iterable[logging.LogRecord] = (),
) -> Path | None:
    """Configure root logging for the app.

    INFO by default; set TASBIH_DEBUG=1 for DEBUG output including every tap.
    Records in ``replay`` (see ``hold_startup_records``) are written to the new
    handlers once they exist.
    """
    root = logging.getLogger()
    if getattr(root, "_tasbih_logging_configured", False):
        _replay(root, replay)
        return getattr(root, "_tasbih_session_log", None)

    level = logging.DEBUG if _env_bool("TASBIH_DEBUG") else logging.INFO
    root.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s [%(threadName)s] %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    logs_dir = Path(base_dir) / "logs"
    safe_app_name = app_name.lower().replace(" ", "-")
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    session_log_path: Path | None = logs_dir / f"{safe_app_name}-{timestamp}.log"
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(session_log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        root.info("Session log file established: %s", session_log_path)
    except OSError as e:
        # Counting works without a log file.
        root.error("Failed to establish session log file: %s", e)
        session_log_path = None

    root._tasbih_logging_configured = True  # type: ignore[attr-defined]
    root._tasbih_session_log = session_log_path  # type: ignore[attr-defined]
    _replay(root, replay)
    return session_log_path


def _replay(root: logging.Logger, records: Iterable[logging.LogRecord]) -> None:
    for record in records:
        root.handle(record)


@contextmanager
def hold_startup_records(capacity: int = 1000) -> Iterator[MemoryHandler]:
    """Buffer root log records emitted before the session handlers exist.

    Pass ``handler.buffer`` to ``setup_session_logging(replay=...)`` afterwards.
    """
    root = logging.getLogger()
    # flushLevel above CRITICAL: nothing leaves the buffer on its own
    handler = MemoryHandler(capacity, flushLevel=logging.CRITICAL + 1)
    root.addHandler(handler)
    try:
        yield handler
    finally:
        root.removeHandler(handler)
