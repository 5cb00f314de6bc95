"""Assemble a generator from a merged configuration dict."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ogcache.cache.backend import ArtifactBackend
from ogcache.cache.client import ArtifactStoreClient
from ogcache.cache.disk import DiskStore
from ogcache.cache.memory import MemoryStore
from ogcache.cache.redis_store import RedisStore
from ogcache.config.defaults import get_defaults
from ogcache.context import AppContext
from ogcache.errors.exceptions import ConfigurationError
from ogcache.generator import OgImageGenerator
from ogcache.metadata.loader import load_metadata_table
from ogcache.render.card import CardRenderer
from ogcache.render.invoker import RenderInvoker
from ogcache.types import StoreBackend

logger = logging.getLogger(__name__)


def config_number(
    config: dict[str, Any],
    key: str,
    target_type: type = float,
    optional: bool = False,
) -> Any:
    """Read a numeric setting, raising ConfigurationError if it does not parse."""
    value = config.get(key)
    if value is None and optional:
        return None
    try:
        return target_type(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"Invalid value for '{key}': {value!r} (expected {target_type.__name__})",
            original=e,
        ) from e


def build_context(config: dict[str, Any]) -> AppContext:
    """Load the metadata table and freeze the per-process settings."""
    table = load_metadata_table(
        config["metadata_path"],
        fallback_identifier=config["fallback_identifier"],
    )
    return AppContext(
        metadata=table,
        brand=config["brand"],
        artifact_ttl_seconds=config_number(config, "artifact_ttl_seconds"),
        client_max_age=config_number(config, "client_max_age", int),
    )


def build_backend(config: dict[str, Any]) -> ArtifactBackend:
    """Instantiate the artifact backend named by ``config['store']``."""
    try:
        kind = StoreBackend(str(config["store"]).lower())
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown store '{config['store']}' "
            f"(expected one of: {', '.join(b.value for b in StoreBackend)})",
            original=e,
        ) from e

    if kind == StoreBackend.DISK:
        disk_path = config.get("disk_path")
        return DiskStore(
            db_path=Path(disk_path) if disk_path else None,
            max_size_mb=config_number(config, "disk_mb"),
        )
    if kind == StoreBackend.REDIS:
        return RedisStore(url=config["redis_url"])
    return MemoryStore(max_size_mb=config_number(config, "memory_mb"))


def build_generator(config: dict[str, Any] | None = None) -> OgImageGenerator:
    """Build a ready-to-serve generator. Raises ConfigurationError on bad setup."""
    config = {**get_defaults(), **(config or {})}
    context = build_context(config)
    timeout = config_number(config, "render_timeout", optional=True)
    backend = build_backend(config)
    renderer = RenderInvoker(
        CardRenderer(font_path=config.get("font_path")),
        timeout=timeout,
    )
    logger.info(
        "Generator ready: %d metadata records, %s store",
        len(context.metadata),
        config["store"],
    )
    return OgImageGenerator(context, ArtifactStoreClient(backend), renderer)
