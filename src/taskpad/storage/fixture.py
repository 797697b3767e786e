# src/taskpad/storage/fixture.py

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from ..tasks.task_models import Task
from .snapshot import deserialize

logger = logging.getLogger(__name__)

FIXTURE_RESOURCE = "data/tasks.json"


def _read_bundled() -> str:
    return resources.files("taskpad").joinpath(FIXTURE_RESOURCE).read_text("utf-8")


def load_fixture(path: str | Path | None = None) -> list[Task]:
    """
    Default task list used when no snapshot exists.

    Reads the bundled data/tasks.json, or `path` when given. A missing or
    broken fixture yields an empty list.
    """
    source = str(path) if path else f"taskpad/{FIXTURE_RESOURCE}"
    try:
        raw = Path(path).read_text("utf-8") if path else _read_bundled()
    except OSError:
        logger.exception("Failed to read task fixture from %s", source)
        return []

    tasks = deserialize(raw)
    if tasks is None:
        logger.error("Task fixture %s is malformed; starting with an empty list.", source)
        return []
    return tasks
