"""Cache store backed by a local SQLite database."""

import json
import logging
import sqlite3
import threading
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class SqliteCacheStore:
    """Persistent get-or-compute cache for JSON-serialisable values.

    Implements CacheStore protocol. Keeps the registry's collection index
    across runs so the CLI does not download it on every invocation.
    Entries carry a wall-clock expiry so they remain valid between processes.
    """

    def __init__(self, db_path: Path, ttl: float | None = None):
        """Initialize the cache store.

        Args:
            db_path: Path to the SQLite database file.
            ttl: Seconds an entry stays valid, or None for no expiry.
        """
        self._db_path = db_path
        self._ttl = ttl
        self._lock = threading.Lock()
        self._initialized = False

    def initialize(self) -> None:
        """Create the database and schema if they don't exist."""
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self._db_path)
        try:
            conn.execute(
                "CREATE TABLE IF NOT EXISTS cache_entries ("
                "key TEXT PRIMARY KEY, "
                "value TEXT NOT NULL, "
                "expires_at REAL"
                ")"
            )
            conn.commit()
        finally:
            conn.close()
        self._initialized = True

    def get(self, key: str, compute: Callable[[], Any]) -> Any:
        with self._lock:
            if not self._initialized:
                self.initialize()

            cached = self._read(key)
            if cached is not None:
                logger.debug(f"Cache hit for {key} in {self._db_path}")
                return cached[0]

            logger.debug(f"Cache miss for {key} in {self._db_path}")
            value = compute()
            self._write(key, value)
            return value

    def delete(self, key: str) -> bool:
        with self._lock:
            if not self._initialized:
                self.initialize()
            conn = sqlite3.connect(self._db_path)
            try:
                cursor = conn.execute("DELETE FROM cache_entries WHERE key = ?", (key,))
                conn.commit()
                return cursor.rowcount > 0
            finally:
                conn.close()

    def clear(self) -> None:
        """Remove every cached entry."""
        with self._lock:
            if not self._initialized:
                self.initialize()
            conn = sqlite3.connect(self._db_path)
            try:
                conn.execute("DELETE FROM cache_entries")
                conn.commit()
            finally:
                conn.close()

    def _read(self, key: str) -> tuple[Any] | None:
        """Return ``(value,)`` for a live entry, or None on a miss.

        The value is wrapped so a cached ``None`` is distinguishable from a miss.
        """
        conn = sqlite3.connect(self._db_path)
        try:
            row = conn.execute(
                "SELECT value, expires_at FROM cache_entries WHERE key = ?", (key,)
            ).fetchone()
        finally:
            conn.close()

        if row is None:
            return None

        value, expires_at = row
        if expires_at is not None and time.time() >= expires_at:
            return None

        try:
            return (json.loads(value),)
        except ValueError:
            logger.warning(f"Discarding unreadable cache entry {key}")
            return None

    def _write(self, key: str, value: Any) -> None:
        expires_at = time.time() + self._ttl if self._ttl is not None else None
        conn = sqlite3.connect(self._db_path)
        try:
            conn.execute(
                "INSERT OR REPLACE INTO cache_entries (key, value, expires_at) VALUES (?, ?, ?)",
                (key, json.dumps(value), expires_at),
            )
            conn.commit()
        finally:
            conn.close()
