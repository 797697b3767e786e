# src/taskpad/storage/mirror.py

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Callable, Iterable

from ..core.ports import KeyValueSlots
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore
from .fixture import load_fixture
from .snapshot import deserialize, serialize

logger = logging.getLogger(__name__)

DEFAULT_SLOT_KEY = "tasks"

FixtureLoader = Callable[[], list[Task]]


class PersistenceMirror:
    """
    Keeps one durable slot equal to the TaskStore's sequence.

    - on_startup(): read slot -> store.load(), then subscribe to changes
    - on_sequence_changed(): full overwrite of the slot, every time

    Storage failures never reach the caller: an unreadable slot is treated as
    absent, a failed write is logged.
    """

    def __init__(
        self,
        slots: KeyValueSlots,
        *,
        key: str = DEFAULT_SLOT_KEY,
        fixture_loader: FixtureLoader | None = None,
    ) -> None:
        self._slots = slots
        self._key = key
        self._fixture_loader: FixtureLoader = fixture_loader or load_fixture
        self._started = False
        self.writes = 0

    @property
    def key(self) -> str:
        return self._key

    def read_snapshot(self) -> list[Task] | None:
        try:
            raw = self._slots.get(self._key)
        except (sqlite3.Error, OSError):
            logger.warning("Slot %r is unreadable; treating it as empty.", self._key, exc_info=True)
            return None
        return deserialize(raw)

    def on_startup(self, store: TaskStore) -> None:
        if self._started:
            logger.warning("PersistenceMirror.on_startup called twice; ignoring.")
            return
        self._started = True

        persisted = self.read_snapshot()
        fixture = self._fixture_loader() if not persisted else []
        store.load(persisted, fixture)
        store.add_listener(self.on_sequence_changed)

    def on_sequence_changed(self, sequence: Iterable[Task]) -> None:
        payload = serialize(sequence)
        try:
            self._slots.set(self._key, payload)
        except (sqlite3.Error, OSError):
            logger.exception("Failed to write slot %r", self._key)
            return
        self.writes += 1
