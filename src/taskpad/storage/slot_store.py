# src/taskpad/storage/slot_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from pathlib import Path

logger = logging.getLogger(__name__)


class SlotStore:
    """
    SQLite key/value store for durable slots.

    One row per slot name; a write replaces the whole value.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "storage.sqlite3") -> None:
        self._db_path = Path(db_path)
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._ensure_schema()
        except (sqlite3.Error, OSError):
            # Reads/writes will fail too; PersistenceMirror treats that as an empty slot.
            logger.warning("SlotStore unusable db=%s", self._db_path, exc_info=True)
            return
        logger.info("SlotStore ready db=%s", self._db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS slots (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    # ---- public API ----

    def get(self, key: str) -> str | None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT value FROM slots WHERE key = ?", (key,))
            row = cur.fetchone()
            return str(row["value"]) if row else None
        finally:
            conn.close()

    def set(self, key: str, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO slots(key, value, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value, time.time()),
            )
            conn.commit()
            logger.debug("Slot written key=%s bytes=%d", key, len(value))
        finally:
            conn.close()

    def delete(self, key: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM slots WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    def keys(self) -> list[str]:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT key FROM slots ORDER BY key ASC")
            return [str(r["key"]) for r in cur.fetchall()]
        finally:
            conn.close()
