# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single to-do item.

    Tasks are values: a mutation produces a new Task with the same id
    (dataclasses.replace), so holders of an older instance never see it change.
    """

    id: str
    title: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Task | None:
        """Strict decode of one stored item; None if the shape is wrong."""
        if not isinstance(raw, dict):
            return None
        task_id = raw.get("id")
        title = raw.get("title")
        completed = raw.get("completed")
        if not isinstance(task_id, str) or not isinstance(title, str):
            return None
        if not isinstance(completed, bool):
            return None
        return cls(id=task_id, title=title, completed=completed)


@dataclass(frozen=True, slots=True)
class EditDraft:
    """Unsaved title edit for one task (never persisted)."""

    task_id: str
    text: str
