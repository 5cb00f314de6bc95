"""ogcache — request-time Open Graph image generation with a content-addressed cache."""

from ogcache.context import AppContext
from ogcache.generator import OgImageGenerator
from ogcache.metadata import MetadataTable, load_metadata_table
from ogcache.types import GeneratedImage, MetadataRecord

__version__ = "0.1.0"

__all__ = [
    "AppContext",
    "GeneratedImage",
    "MetadataRecord",
    "MetadataTable",
    "OgImageGenerator",
    "load_metadata_table",
]
