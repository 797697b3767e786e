# tests/conftest.py

from __future__ import annotations

import json
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.cli.bootstrap import create_initial_state
from taskpad.core.state import AppState

from .fakes import InMemorySlots, sequential_ids

FIXTURE_TASKS = [
    {"id": "f1", "title": "Fixture one", "completed": False},
    {"id": "f2", "title": "Fixture two", "completed": True},
]


@pytest.fixture()
def fixture_file(tmp_path: Path) -> Path:
    path = tmp_path / "fixture.json"
    path.write_text(json.dumps(FIXTURE_TASKS), "utf-8")
    return path


@pytest.fixture()
def settings(tmp_path: Path, fixture_file: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        data_dir=tmp_path / "data",
        storage_db_path=tmp_path / "data" / "storage.sqlite3",
        storage_key="tasks",
        fixture_path=fixture_file,
    )


@pytest.fixture()
def slots() -> InMemorySlots:
    return InMemorySlots()


@pytest.fixture()
def state(settings: SimpleNamespace, slots: InMemorySlots) -> AppState:
    """AppState seeded from the test fixture, backed by an in-memory slot."""
    return create_initial_state(settings=settings, slots=slots, id_factory=sequential_ids())
