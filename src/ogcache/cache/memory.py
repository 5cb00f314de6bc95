"""In-process LRU artifact store with per-entry TTL."""

from __future__ import annotations

from collections import OrderedDict

from ogcache.cache.entry import ArtifactEntry

_DEFAULT_MAX_SIZE_MB = 256


class MemoryStore:
    """In-memory LRU store with size-based eviction.

    Single event loop only; there is no locking.
    """

    def __init__(self, max_size_mb: float = _DEFAULT_MAX_SIZE_MB) -> None:
        self._store: OrderedDict[str, ArtifactEntry] = OrderedDict()
        self._max_size_bytes = int(max_size_mb * 1024 * 1024)
        self._current_size_bytes = 0

    async def get(self, key: str) -> bytes | None:
        entry = self.get_entry(key)
        return entry.data if entry is not None else None

    async def put(self, key: str, data: bytes, ttl_seconds: float) -> None:
        self.set_entry(ArtifactEntry(key=key, data=data, ttl_seconds=ttl_seconds))

    def get_entry(self, key: str) -> ArtifactEntry | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        if entry.is_expired:
            self._remove(key)
            return None
        # Move to end (most recently used)
        self._store.move_to_end(key)
        return entry

    def set_entry(self, entry: ArtifactEntry) -> None:
        if entry.key in self._store:
            self._remove(entry.key)
        # Evict until there's room
        while self._current_size_bytes + entry.size_bytes > self._max_size_bytes and self._store:
            self._evict_oldest()
        self._store[entry.key] = entry
        self._current_size_bytes += entry.size_bytes

    def clear(self) -> None:
        self._store.clear()
        self._current_size_bytes = 0

    @property
    def size_mb(self) -> float:
        return self._current_size_bytes / (1024 * 1024)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def _remove(self, key: str) -> None:
        entry = self._store.pop(key, None)
        if entry:
            self._current_size_bytes -= entry.size_bytes

    def _evict_oldest(self) -> None:
        _, entry = self._store.popitem(last=False)
        self._current_size_bytes -= entry.size_bytes
