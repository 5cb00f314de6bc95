"""Generate-or-serve orchestration for Open Graph images."""

from __future__ import annotations

import logging

from ogcache.cache.client import ArtifactStoreClient
from ogcache.cache.keys import build_cache_key, fingerprint
from ogcache.context import AppContext
from ogcache.errors.exceptions import ClientInputError, StoreError
from ogcache.render.invoker import RenderInvoker
from ogcache.types import GeneratedImage, RenderRequest, Resolution

logger = logging.getLogger(__name__)


class OgImageGenerator:
    """Resolves metadata, derives the cache key, and serves or renders.

    Concurrent first requests for the same key each render and write
    independently; the store's last write wins.
    """

    def __init__(
        self,
        context: AppContext,
        store: ArtifactStoreClient,
        renderer: RenderInvoker,
    ) -> None:
        self._context = context
        self._store = store
        self._renderer = renderer

    @property
    def context(self) -> AppContext:
        return self._context

    @property
    def store(self) -> ArtifactStoreClient:
        return self._store

    def resolve(self, identifier: str) -> Resolution:
        return self._context.metadata.resolve(identifier)

    def cache_key(self, identifier: str) -> str:
        """Cache key the given identifier resolves to."""
        resolution = self.resolve(identifier)
        return build_cache_key(resolution.identifier, fingerprint(resolution.record))

    async def generate(self, identifier: str | None) -> bytes:
        """Return image bytes for identifier, rendering on a cache miss."""
        result = await self.generate_image(identifier)
        return result.data

    async def generate_image(self, identifier: str | None) -> GeneratedImage:
        if not identifier:
            raise ClientInputError("Missing 'p' query parameter", parameter="p")

        resolution = self.resolve(identifier)
        key = build_cache_key(resolution.identifier, fingerprint(resolution.record))
        logger.debug("Cache key for %s: %s", identifier, key)

        cached = await self._lookup(key)
        if cached is not None:
            logger.info("Serving cached image for %s", key)
            return GeneratedImage(key=key, data=cached, cached=True)

        logger.info("Generating image for %s", key)
        record = resolution.record.normalized()
        data = await self._renderer.render(
            RenderRequest(
                brand=self._context.brand,
                title=record.title,
                description=record.description,
            )
        )

        await self._write_back(key, data)
        return GeneratedImage(key=key, data=data, cached=False)

    async def _lookup(self, key: str) -> bytes | None:
        try:
            return await self._store.lookup(key)
        except StoreError as e:
            logger.warning("Cache lookup failed for %s, rendering instead: %s", key, e)
            return None

    async def _write_back(self, key: str, data: bytes) -> None:
        try:
            await self._store.store(key, data, self._context.artifact_ttl_seconds)
        except StoreError as e:
            logger.warning("Failed to cache image for %s: %s", key, e)
