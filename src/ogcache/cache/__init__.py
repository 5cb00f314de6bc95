"""Cache subsystem — content-addressed keys and pluggable artifact stores."""

from ogcache.cache.backend import ArtifactBackend
from ogcache.cache.client import ArtifactStoreClient
from ogcache.cache.disk import DiskStore
from ogcache.cache.entry import ONE_YEAR_SECONDS, ArtifactEntry
from ogcache.cache.keys import build_cache_key, canonical_bytes, fingerprint, fnv_mix32
from ogcache.cache.memory import MemoryStore
from ogcache.cache.redis_store import RedisStore

__all__ = [
    "ONE_YEAR_SECONDS",
    "ArtifactBackend",
    "ArtifactEntry",
    "ArtifactStoreClient",
    "DiskStore",
    "MemoryStore",
    "RedisStore",
    "build_cache_key",
    "canonical_bytes",
    "fingerprint",
    "fnv_mix32",
]
