"""
Key/value stores backing the service directory.

The directory only ever needs two coroutines: ``get(key)`` returning
the stored text (or ``None``) and ``put(key, value)`` overwriting it.
``SQLiteKeyValueStore`` keeps the values in the ``kv_store`` table;
``InMemoryKeyValueStore`` keeps them in a dictionary and is handy for
tests and local experiments.  Any object offering the same two
coroutines can be passed to ``ServiceDirectory``.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ownerbot_api.app.core.db import get_connection


logger = logging.getLogger(__name__)


class SQLiteKeyValueStore:
    """Key/value store persisted in the ``kv_store`` SQLite table."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    async def get(self, key: str) -> Optional[str]:
        """Return the value stored under ``key`` or ``None``."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            row = cursor.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
            if not row:
                return None
            return row["value"]
        finally:
            conn.close()

    async def put(self, key: str, value: str) -> None:
        """Insert or overwrite the value stored under ``key``."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO kv_store (key, value) VALUES (?, ?)"
                " ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP",
                (key, value),
            )
            conn.commit()
            logger.debug("Stored %d characters under %s", len(value), key)
        finally:
            conn.close()


class InMemoryKeyValueStore:
    """Dictionary-backed store with the same interface."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.values: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    async def put(self, key: str, value: str) -> None:
        self.values[key] = value
