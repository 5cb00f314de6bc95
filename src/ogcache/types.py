"""Shared Pydantic models for ogcache."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from ogcache.utils.text import normalize_whitespace

# ── Enums ──


class ErrorKind(StrEnum):
    CONFIGURATION = "configuration"
    CLIENT_INPUT = "client_input"
    RENDER = "render"
    STORE = "store"


class StoreBackend(StrEnum):
    MEMORY = "memory"
    DISK = "disk"
    REDIS = "redis"


# ── Metadata models ──


class MetadataRecord(BaseModel):
    """Title and description for one page, as produced by the site build."""

    title: str
    description: str
    model_config = {"frozen": True}

    def normalized(self) -> MetadataRecord:
        """Return a copy whose description has its whitespace runs collapsed."""
        return self.model_copy(update={"description": normalize_whitespace(self.description)})


class Resolution(BaseModel):
    """Result of looking an identifier up in the metadata table."""

    identifier: str
    record: MetadataRecord
    is_fallback: bool = False
    model_config = {"frozen": True}


# ── Runtime models ──


class RenderRequest(BaseModel):
    brand: str
    title: str
    description: str
    model_config = {"frozen": True}


class GeneratedImage(BaseModel):
    key: str
    data: bytes
    cached: bool = False

    @property
    def size_bytes(self) -> int:
        return len(self.data)


class CacheStats(BaseModel):
    """Counters kept by the artifact store client."""

    hits: int = 0
    misses: int = 0
    writes: int = 0
    lookup_errors: int = 0
    write_errors: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0
