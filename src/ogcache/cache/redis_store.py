"""Redis artifact store using GET and SETEX, with the store's own TTL expiry."""

from __future__ import annotations

import logging
import math

import redis.asyncio as aioredis

logger = logging.getLogger(__name__)

_DEFAULT_REDIS_URL = "redis://localhost:6379/0"


class RedisStore:
    """Stores artifacts in Redis; expiry is left entirely to Redis."""

    def __init__(
        self,
        url: str = _DEFAULT_REDIS_URL,
        key_prefix: str = "og:",
        client: aioredis.Redis | None = None,
    ) -> None:
        self._client = client or aioredis.Redis.from_url(url)
        self._key_prefix = key_prefix

    async def get(self, key: str) -> bytes | None:
        return await self._client.get(self._key_prefix + key)

    async def put(self, key: str, data: bytes, ttl_seconds: float) -> None:
        await self._client.setex(self._key_prefix + key, max(1, math.ceil(ttl_seconds)), data)
        logger.debug("Stored %d bytes in Redis under %s", len(data), key)

    async def close(self) -> None:
        await self._client.aclose()
