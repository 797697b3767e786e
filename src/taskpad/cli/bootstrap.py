# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the slot store, mirror and task store into AppState,
- runs the one-time startup load.
"""

from __future__ import annotations

import logging
from functools import partial

from ..config import get_settings
from ..core.ports import KeyValueSlots
from ..core.state import AppState
from ..storage.fixture import load_fixture
from ..storage.mirror import PersistenceMirror
from ..storage.slot_store import SlotStore
from ..tasks.task_store import IdFactory, TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    slots: KeyValueSlots | None = None,
    id_factory: IdFactory | None = None,
) -> AppState:
    """
    Create AppState from the provided settings and load the task list.

    Keeping settings (and the slot backend) injectable makes the app easy to
    test. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if slots is None:
        slots = SlotStore(settings.storage_db_path)

    fixture_path = getattr(settings, "fixture_path", None)
    mirror = PersistenceMirror(
        slots,
        key=settings.storage_key,
        fixture_loader=partial(load_fixture, fixture_path),
    )
    store = TaskStore(id_factory=id_factory)
    mirror.on_startup(store)

    logger.info("Task list ready: %d task(s), slot=%s", len(store), settings.storage_key)
    return AppState(settings=settings, store=store, mirror=mirror, slots=slots)
