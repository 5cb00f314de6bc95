"""Stored artifact model."""

from __future__ import annotations

import time

from pydantic import BaseModel, Field

ONE_YEAR_SECONDS = 365 * 24 * 3600


class ArtifactEntry(BaseModel):
    """Image bytes stored under a cache key, with an expiry."""

    key: str
    data: bytes
    created_at: float = Field(default_factory=time.time)
    ttl_seconds: float = ONE_YEAR_SECONDS

    @property
    def expires_at(self) -> float:
        return self.created_at + self.ttl_seconds

    @property
    def is_expired(self) -> bool:
        return time.time() > self.expires_at

    @property
    def size_bytes(self) -> int:
        return len(self.data)
