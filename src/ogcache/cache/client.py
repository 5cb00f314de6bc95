"""Artifact store client: the generator's only view of the backend."""

from __future__ import annotations

import logging

from ogcache.cache.backend import ArtifactBackend
from ogcache.errors.exceptions import StoreError
from ogcache.types import CacheStats

logger = logging.getLogger(__name__)


class ArtifactStoreClient:
    """Thin adapter over an ArtifactBackend.

    Every backend exception is re-raised as StoreError; the caller decides
    whether to absorb it.
    """

    def __init__(self, backend: ArtifactBackend) -> None:
        self._backend = backend
        self._stats = CacheStats()

    @property
    def backend(self) -> ArtifactBackend:
        return self._backend

    async def lookup(self, key: str) -> bytes | None:
        """Return stored bytes for key, or None on a miss."""
        try:
            data = await self._backend.get(key)
        except Exception as e:
            self._stats.lookup_errors += 1
            raise StoreError(
                f"Artifact lookup failed: {e}", operation="lookup", key=key, original=e
            ) from e

        if data is None:
            self._stats.misses += 1
            return None
        self._stats.hits += 1
        return bytes(data)

    async def store(self, key: str, data: bytes, ttl_seconds: float) -> None:
        try:
            await self._backend.put(key, data, ttl_seconds)
        except Exception as e:
            self._stats.write_errors += 1
            raise StoreError(
                f"Artifact write failed: {e}", operation="store", key=key, original=e
            ) from e
        self._stats.writes += 1

    def stats(self) -> CacheStats:
        return self._stats.model_copy()

    async def close(self) -> None:
        close = getattr(self._backend, "close", None)
        if close is None:
            return
        result = close()
        if hasattr(result, "__await__"):
            await result
