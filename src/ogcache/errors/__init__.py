"""Error handling — tagged exception hierarchy."""

from ogcache.errors.exceptions import (
    ClientInputError,
    ConfigurationError,
    OgCacheError,
    RenderError,
    StoreError,
)

__all__ = [
    "OgCacheError",
    "ConfigurationError",
    "ClientInputError",
    "RenderError",
    "StoreError",
]
