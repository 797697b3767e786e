# src/taskpad/storage/snapshot.py

"""JSON codec for the task list as stored in a slot (and in the fixture)."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


def serialize(tasks: Iterable[Task]) -> str:
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)


def deserialize(raw: str | None) -> list[Task] | None:
    """
    Decode a stored task array.

    Returns None when there is nothing usable: no value, invalid JSON,
    a non-array top level, or any element with the wrong shape.
    """
    if raw is None or not raw.strip():
        return None

    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("Stored task list is not valid JSON; ignoring it.")
        return None

    if not isinstance(data, list):
        logger.warning("Stored task list is %s, expected an array; ignoring it.", type(data).__name__)
        return None

    out: list[Task] = []
    for i, item in enumerate(data):
        task = Task.from_dict(item)
        if task is None:
            logger.warning("Stored task #%d is malformed; ignoring the whole list.", i)
            return None
        out.append(task)
    return out
