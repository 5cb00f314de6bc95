"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

from ogcache.cache.entry import ONE_YEAR_SECONDS

# Card content
DEFAULT_BRAND = "127.io | Creative Articulation"
DEFAULT_METADATA_PATH = "public/og-metadata.json"
DEFAULT_FALLBACK_IDENTIFIER = "default"

# Artifact store settings
DEFAULT_STORE = "memory"
DEFAULT_ARTIFACT_TTL_SECONDS = ONE_YEAR_SECONDS
DEFAULT_MEMORY_MB = 256.0
DEFAULT_DISK_MB = 2000.0
DEFAULT_REDIS_URL = "redis://localhost:6379/0"

# Client-facing cache directive (seconds)
DEFAULT_CLIENT_MAX_AGE = 3600

# Rendering
DEFAULT_RENDER_TIMEOUT: float | None = None

# HTTP server
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8787

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "brand": DEFAULT_BRAND,
        "metadata_path": DEFAULT_METADATA_PATH,
        "fallback_identifier": DEFAULT_FALLBACK_IDENTIFIER,
        "store": DEFAULT_STORE,
        "artifact_ttl_seconds": DEFAULT_ARTIFACT_TTL_SECONDS,
        "memory_mb": DEFAULT_MEMORY_MB,
        "disk_mb": DEFAULT_DISK_MB,
        "disk_path": None,
        "redis_url": DEFAULT_REDIS_URL,
        "client_max_age": DEFAULT_CLIENT_MAX_AGE,
        "render_timeout": DEFAULT_RENDER_TIMEOUT,
        "font_path": None,
        "host": DEFAULT_HOST,
        "port": DEFAULT_PORT,
        "log_level": DEFAULT_LOG_LEVEL,
    }
