"""Metadata table — static page metadata loaded once at startup."""

from ogcache.metadata.loader import load_metadata_table
from ogcache.metadata.table import FALLBACK_IDENTIFIER, MetadataTable

__all__ = [
    "FALLBACK_IDENTIFIER",
    "MetadataTable",
    "load_metadata_table",
]
