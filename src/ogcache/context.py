"""Immutable per-process context, built once at startup."""

from __future__ import annotations

from dataclasses import dataclass

from ogcache.cache.entry import ONE_YEAR_SECONDS
from ogcache.config.defaults import DEFAULT_BRAND, DEFAULT_CLIENT_MAX_AGE
from ogcache.metadata.table import MetadataTable


@dataclass(frozen=True)
class AppContext:
    """Everything the generator needs that never changes after startup."""

    metadata: MetadataTable
    brand: str = DEFAULT_BRAND
    artifact_ttl_seconds: float = ONE_YEAR_SECONDS
    client_max_age: int = DEFAULT_CLIENT_MAX_AGE

    @property
    def cache_control(self) -> str:
        return f"public, max-age={self.client_max_age}, immutable"
