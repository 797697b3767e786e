# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The mirror depends on a Protocol instead of the SQLite store so tests can
swap in an in-memory slot.
"""

from typing import Protocol


class KeyValueSlots(Protocol):
    """Durable string slots addressed by name (local-storage style)."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...
