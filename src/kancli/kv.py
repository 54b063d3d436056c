"""Byte-oriented key-value store on top of SQLite."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from kancli.errors import StoreError

logger = logging.getLogger(__name__)

SCHEMA = "CREATE TABLE IF NOT EXISTS kv (key BLOB PRIMARY KEY, value BLOB NOT NULL)"


class KV:
    """Durable get/set by key.

    Every ``set`` is its own committed transaction, so a write either
    lands completely or raises. All sqlite and filesystem failures are
    re-raised as StoreError.
    """

    def __init__(self, conn: sqlite3.Connection, path: Path | None = None) -> None:
        self._conn: sqlite3.Connection | None = conn
        self.path = path

    @classmethod
    def open(cls, path: Path | str) -> KV:
        """Open (creating if needed) the database at path."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(path)
            conn.execute(SCHEMA)
            conn.commit()
        except (sqlite3.Error, OSError) as e:
            raise StoreError(f"cannot open store {path}: {e}") from e
        logger.info("opened store %s", path)
        return cls(conn, path)

    @classmethod
    def memory(cls) -> KV:
        """Throwaway in-memory store."""
        conn = sqlite3.connect(":memory:")
        conn.execute(SCHEMA)
        return cls(conn)

    def __enter__(self) -> KV:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._conn is None

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreError("store is closed")
        return self._conn

    def get(self, key: bytes) -> bytes | None:
        """Value stored under key, or None if absent."""
        try:
            row = self._connection().execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            raise StoreError(f"cannot read {key!r}: {e}") from e
        return bytes(row[0]) if row else None

    def set(self, key: bytes, value: bytes) -> None:
        conn = self._connection()
        try:
            with conn:
                conn.execute(
                    "INSERT INTO kv (key, value) VALUES (?, ?) ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    (key, value),
                )
        except sqlite3.Error as e:
            raise StoreError(f"cannot write {key!r}: {e}") from e

    def __contains__(self, key: bytes) -> bool:
        return self.get(key) is not None

    def close(self) -> None:
        """Close the connection. Closing twice is harmless."""
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        try:
            conn.close()
        except sqlite3.Error as e:
            raise StoreError(f"cannot close store: {e}") from e
        logger.info("closed store %s", self.path or ":memory:")
