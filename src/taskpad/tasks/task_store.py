# src/taskpad/tasks/task_store.py

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable
from dataclasses import replace

from .task_models import EditDraft, Task

logger = logging.getLogger(__name__)

SequenceListener = Callable[[tuple[Task, ...]], None]
IdFactory = Callable[[], str]


def _uuid4_str() -> str:
    return str(uuid.uuid4())


class TaskStore:
    """
    In-memory task list (the only mutation API for it).

    Rules:
    - insertion order is display order and persistence order
    - ids are generated once and never reused within the sequence
    - invalid ids and blank text are silent no-ops (nothing raises)
    - listeners run synchronously after every call that changed the sequence;
      load() and the edit-draft calls never notify
    """

    def __init__(self, *, id_factory: IdFactory | None = None) -> None:
        self._tasks: list[Task] = []
        self._draft: EditDraft | None = None
        self._id_factory: IdFactory = id_factory or _uuid4_str
        self._listeners: list[SequenceListener] = []

    # ---- read side ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def draft(self) -> EditDraft | None:
        return self._draft

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def is_editing(self, task_id: str | None = None) -> bool:
        if self._draft is None:
            return False
        return task_id is None or self._draft.task_id == task_id

    # ---- listeners ----

    def add_listener(self, listener: SequenceListener) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        snapshot = self.tasks
        for listener in list(self._listeners):
            listener(snapshot)

    # ---- load ----

    def load(self, persisted: Iterable[Task] | None, fixture: Iterable[Task]) -> None:
        """
        Adopt the persisted snapshot if it has at least one task, else the fixture.

        The two sources are never merged.
        """
        saved = list(persisted) if persisted is not None else []
        if saved:
            self._tasks = saved
            logger.info("Loaded %d task(s) from snapshot.", len(saved))
        else:
            self._tasks = list(fixture)
            logger.info("No saved tasks; seeded %d task(s) from fixture.", len(self._tasks))

    # ---- mutations ----

    def _new_id(self) -> str:
        taken = {t.id for t in self._tasks}
        while True:
            candidate = self._id_factory()
            if candidate not in taken:
                return candidate
            logger.debug("Id collision on %s, drawing again.", candidate)

    def add(self, title: str) -> Task | None:
        if not title or not title.strip():
            return None

        # Stored as typed; only the emptiness check trims.
        task = Task(id=self._new_id(), title=title, completed=False)
        self._tasks = [*self._tasks, task]
        logger.debug("Task added id=%s", task.id)
        self._notify()
        return task

    def toggle(self, task_id: str) -> Task | None:
        updated: Task | None = None
        out: list[Task] = []
        for task in self._tasks:
            if updated is None and task.id == task_id:
                updated = replace(task, completed=not task.completed)
                out.append(updated)
            else:
                out.append(task)

        if updated is None:
            return None

        self._tasks = out
        logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
        self._notify()
        return updated

    def remove(self, task_id: str) -> Task | None:
        removed = self.get(task_id)
        if removed is None:
            return None

        self._tasks = [t for t in self._tasks if t.id != task_id]
        logger.debug("Task removed id=%s", task_id)
        self._notify()
        return removed

    # ---- edit draft ----

    def begin_edit(self, task_id: str, current_title: str) -> None:
        if self._draft is not None and self._draft.task_id != task_id:
            logger.debug("Discarding unsaved draft for id=%s", self._draft.task_id)
        self._draft = EditDraft(task_id=task_id, text=current_title)

    def update_draft(self, text: str) -> None:
        if self._draft is None:
            return
        self._draft = replace(self._draft, text=text)

    def commit_edit(self) -> Task | None:
        """
        Apply the draft text as the task's new title.

        A blank draft is rejected and the edit stays open.
        """
        draft = self._draft
        if draft is None or not draft.text.strip():
            return None

        updated: Task | None = None
        out: list[Task] = []
        for task in self._tasks:
            if task.id == draft.task_id:
                updated = replace(task, title=draft.text)
                out.append(updated)
            else:
                out.append(task)

        self._draft = None

        if updated is None:
            # Task was removed while being edited.
            logger.debug("Draft target id=%s is gone; edit dropped.", draft.task_id)
            return None

        self._tasks = out
        logger.debug("Task retitled id=%s", updated.id)
        self._notify()
        return updated

    def cancel_edit(self) -> None:
        self._draft = None
