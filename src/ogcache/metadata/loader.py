"""Load the build-time metadata artifact (JSON) into a MetadataTable."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ogcache.errors.exceptions import ConfigurationError
from ogcache.metadata.table import FALLBACK_IDENTIFIER, MetadataTable
from ogcache.types import MetadataRecord

logger = logging.getLogger(__name__)


def load_metadata_table(
    path: str | Path,
    fallback_identifier: str = FALLBACK_IDENTIFIER,
) -> MetadataTable:
    """Load an ``{identifier: {title, description}}`` JSON file.

    Raises ConfigurationError for anything that would leave the service
    unable to resolve metadata: missing file, invalid JSON, a non-mapping
    document, an invalid record, or a missing fallback record.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Metadata file not found: {path}", source=str(path))

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid metadata JSON in {path}: {e}", source=str(path), original=e
        ) from e

    table = metadata_table_from_dict(raw, fallback_identifier, source=str(path))
    logger.info("Loaded %d metadata records from %s", len(table), path)
    return table


def metadata_table_from_dict(
    raw: Any,
    fallback_identifier: str = FALLBACK_IDENTIFIER,
    source: str | None = None,
) -> MetadataTable:
    """Validate a decoded metadata document and build the table."""
    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Expected metadata mapping, got {type(raw).__name__}", source=source
        )

    records: dict[str, MetadataRecord] = {}
    for identifier, value in raw.items():
        if not isinstance(value, dict):
            raise ConfigurationError(
                f"Metadata for '{identifier}' is not a mapping", source=source
            )
        try:
            records[identifier] = MetadataRecord(**value)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid metadata for '{identifier}': {e}", source=source, original=e
            ) from e

    return MetadataTable(records, fallback_identifier=fallback_identifier)
