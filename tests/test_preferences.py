# -*- coding: utf-8 -*-
"""Tests for the JSON-backed preferences namespace."""

from __future__ import annotations

import json
from pathlib import Path

from tasbih.core.preferences import Preferences


def test_open_uses_namespace_file_name(tmp_path: Path) -> None:
    assert Preferences.open(tmp_path).path == tmp_path / "TasbihPrefs.json"
    assert Preferences.open(tmp_path, "Other").path == tmp_path / "Other.json"


def test_missing_file_returns_defaults(prefs: Preferences) -> None:
    assert prefs.get_all() == {}
    assert prefs.get_int("counter", 7) == 7
    assert prefs.get_bool("vibration", True) is True


def test_commit_writes_values(prefs: Preferences) -> None:
    assert prefs.edit().put_int("counter", 12).put_bool("dark_mode", True).commit() is True
    assert json.loads(prefs.path.read_text(encoding="utf-8")) == {"counter": 12, "dark_mode": True}
    assert prefs.get_int("counter", 0) == 12
    assert prefs.get_bool("dark_mode", False) is True


def test_uncommitted_changes_are_not_visible(prefs: Preferences) -> None:
    prefs.edit().put_int("counter", 3)
    assert prefs.get_int("counter", 0) == 0
    assert not prefs.path.exists()


def test_commit_merges_with_existing_values(prefs: Preferences) -> None:
    prefs.edit().put_bool("dark_mode", True).commit()
    prefs.edit().put_int("counter", 4).commit()
    assert prefs.get_all() == {"dark_mode": True, "counter": 4}


def test_bool_is_not_read_as_int(prefs: Preferences, write_prefs) -> None:
    write_prefs({"counter": True})
    assert prefs.get_int("counter", 0) == 0


def test_int_is_not_read_as_bool(prefs: Preferences, write_prefs) -> None:
    write_prefs({"dark_mode": 1})
    assert prefs.get_bool("dark_mode", False) is False


def test_non_object_file_returns_defaults(prefs: Preferences) -> None:
    prefs.path.write_text("[1, 2, 3]", encoding="utf-8")
    assert prefs.get_all() == {}
    assert prefs.get_int("counter", 0) == 0


def test_remove_and_clear(prefs: Preferences) -> None:
    prefs.edit().put_int("counter", 1).put_bool("wakelock", True).commit()
    prefs.edit().remove("counter").commit()
    assert prefs.get_all() == {"wakelock": True}

    prefs.edit().clear().put_bool("vibration", False).commit()
    assert prefs.get_all() == {"vibration": False}


def test_commit_replaces_corrupt_file(prefs: Preferences) -> None:
    prefs.path.write_text("{broken", encoding="utf-8")
    assert prefs.edit().put_int("counter", 2).commit() is True
    assert prefs.get_all() == {"counter": 2}


def test_commit_leaves_no_temp_file(prefs: Preferences, prefs_dir: Path) -> None:
    prefs.edit().put_int("counter", 9).commit()
    assert sorted(p.name for p in prefs_dir.iterdir()) == ["TasbihPrefs.json"]


def test_commit_creates_missing_directory(tmp_path: Path) -> None:
    prefs = Preferences.open(tmp_path / "nested" / "dir")
    assert prefs.edit().put_bool("dark_mode", True).commit() is True
    assert prefs.get_bool("dark_mode", False) is True


def test_commit_failure_returns_false(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    prefs = Preferences.open(blocker)
    assert prefs.edit().put_int("counter", 1).commit() is False
    assert prefs.get_int("counter", 0) == 0
