"""Persistent artifact store backed by SQLite."""

from __future__ import annotations

import asyncio
import logging
import sqlite3
import threading
import time
from pathlib import Path

from ogcache.cache.entry import ArtifactEntry

logger = logging.getLogger(__name__)

_DEFAULT_MAX_SIZE_MB = 2000
_DEFAULT_DB_PATH = Path.home() / ".ogcache" / "artifacts.db"


class DiskStore:
    """SQLite-backed store with TTL expiry and LRU eviction.

    The async methods run queries in a worker thread; one lock serializes
    access to the shared connection.
    """

    def __init__(
        self,
        db_path: Path | None = None,
        max_size_mb: float = _DEFAULT_MAX_SIZE_MB,
    ) -> None:
        self._db_path = db_path or _DEFAULT_DB_PATH
        self._max_size_bytes = int(max_size_mb * 1024 * 1024)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.RLock()
        self._create_table()

    @property
    def path(self) -> Path:
        return self._db_path

    async def get(self, key: str) -> bytes | None:
        entry = await asyncio.to_thread(self.get_entry, key)
        return entry.data if entry is not None else None

    async def put(self, key: str, data: bytes, ttl_seconds: float) -> None:
        entry = ArtifactEntry(key=key, data=data, ttl_seconds=ttl_seconds)
        await asyncio.to_thread(self.set_entry, entry)

    def get_entry(self, key: str) -> ArtifactEntry | None:
        with self._lock:
            return self._get_entry(key)

    def set_entry(self, entry: ArtifactEntry) -> None:
        with self._lock:
            self._set_entry(entry)

    def clear(self) -> int:
        with self._lock:
            cursor = self._conn.execute("DELETE FROM artifacts")
            self._conn.commit()
            return cursor.rowcount

    def purge_expired(self) -> int:
        with self._lock:
            cursor = self._conn.execute(
                "DELETE FROM artifacts WHERE created_at + ttl_seconds < ?",
                (time.time(),),
            )
            self._conn.commit()
            return cursor.rowcount

    def _get_entry(self, key: str) -> ArtifactEntry | None:
        row = self._conn.execute(
            "SELECT * FROM artifacts WHERE key = ?", (key,)
        ).fetchone()
        if row is None:
            return None
        entry = ArtifactEntry(
            key=row["key"],
            data=row["data"],
            created_at=row["created_at"],
            ttl_seconds=row["ttl_seconds"],
        )
        if entry.is_expired:
            self._conn.execute("DELETE FROM artifacts WHERE key = ?", (key,))
            self._conn.commit()
            return None
        # Update last_accessed for LRU
        self._conn.execute(
            "UPDATE artifacts SET last_accessed = ? WHERE key = ?",
            (time.time(), key),
        )
        self._conn.commit()
        return entry

    def _set_entry(self, entry: ArtifactEntry) -> None:
        self._evict_if_needed(entry.size_bytes)
        self._conn.execute(
            """INSERT OR REPLACE INTO artifacts
               (key, created_at, ttl_seconds, last_accessed, data, size_bytes)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (
                entry.key, entry.created_at, entry.ttl_seconds, time.time(),
                sqlite3.Binary(entry.data), entry.size_bytes,
            ),
        )
        self._conn.commit()

    @property
    def entry_count(self) -> int:
        row = self._conn.execute("SELECT COUNT(*) FROM artifacts").fetchone()
        return row[0]

    @property
    def size_mb(self) -> float:
        row = self._conn.execute(
            "SELECT COALESCE(SUM(size_bytes), 0) FROM artifacts"
        ).fetchone()
        return row[0] / (1024 * 1024)

    def close(self) -> None:
        self._conn.close()

    def _create_table(self) -> None:
        self._conn.execute("""
            CREATE TABLE IF NOT EXISTS artifacts (
                key TEXT PRIMARY KEY,
                created_at REAL,
                ttl_seconds REAL,
                last_accessed REAL,
                data BLOB,
                size_bytes INTEGER
            )
        """)
        self._conn.commit()

    def _evict_if_needed(self, new_entry_size: int) -> None:
        purged = self.purge_expired()
        if purged:
            logger.debug("Purged %d expired artifacts", purged)

        while True:
            row = self._conn.execute(
                "SELECT COALESCE(SUM(size_bytes), 0) FROM artifacts"
            ).fetchone()
            if row[0] + new_entry_size <= self._max_size_bytes:
                break
            oldest = self._conn.execute(
                "SELECT key FROM artifacts ORDER BY last_accessed ASC LIMIT 1"
            ).fetchone()
            if oldest is None:
                break
            self._conn.execute("DELETE FROM artifacts WHERE key = ?", (oldest[0],))
            self._conn.commit()
