# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from taskpad.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in (
        "TASKPAD_APP_NAME",
        "TASKPAD_LOG_LEVEL",
        "TASKPAD_LOG_TO_FILE",
        "TASKPAD_DATA_DIR",
        "TASKPAD_STORAGE_DB_PATH",
        "TASKPAD_STORAGE_KEY",
        "TASKPAD_FIXTURE_PATH",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.app_name == "taskpad"
    assert s.log_level == "INFO"
    assert s.log_to_file is True
    assert s.data_dir == Path(".local/taskpad")
    assert s.storage_db_path == Path(".local/taskpad") / "storage.sqlite3"
    assert s.storage_key == "tasks"
    assert s.fixture_path is None


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKPAD_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("TASKPAD_STORAGE_DB_PATH", raising=False)
    monkeypatch.setenv("TASKPAD_STORAGE_KEY", "  ")
    monkeypatch.setenv("TASKPAD_LOG_TO_FILE", "off")
    monkeypatch.setenv("TASKPAD_FIXTURE_PATH", str(tmp_path / "seed.json"))

    s = Settings.from_env()

    assert s.storage_db_path == tmp_path / "storage.sqlite3"
    assert s.storage_key == "tasks"
    assert s.log_to_file is False
    assert s.fixture_path == tmp_path / "seed.json"
