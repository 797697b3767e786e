# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..storage.mirror import PersistenceMirror
from ..tasks.task_store import TaskStore
from .ports import KeyValueSlots


@dataclass
class AppState:
    # Settings live on the state so commands can report paths/keys.
    settings: object

    store: TaskStore
    mirror: PersistenceMirror
    slots: KeyValueSlots
