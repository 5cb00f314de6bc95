"""Cache key generation, bound to the exact metadata that produced an image."""

from __future__ import annotations

import json

from ogcache.types import MetadataRecord

KEY_DELIMITER = ":"

_FNV_OFFSET_BASIS = 0x811C9DC5
_MASK_32 = 0xFFFFFFFF


def canonical_bytes(record: MetadataRecord) -> bytes:
    """Serialize a record as compact JSON, title then description, UTF-8.

    The description is whitespace-normalized first so formatting-only edits
    to the source metadata keep the same key.
    """
    normalized = record.normalized()
    payload = {"title": normalized.title, "description": normalized.description}
    serialized = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return serialized.encode("utf-8")


def fnv_mix32(data: bytes) -> int:
    """32-bit FNV-style streaming hash over bytes.

    Multiplication by the FNV prime is expressed as the shift-and-add
    sequence; arithmetic wraps at 32 bits.
    """
    h = _FNV_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h + (h << 1) + (h << 4) + (h << 7) + (h << 8) + (h << 24)) & _MASK_32
    return h


def fingerprint(record: MetadataRecord) -> str:
    """Fixed-width (8 char) lowercase hex fingerprint of a record."""
    return f"{fnv_mix32(canonical_bytes(record)):08x}"


def build_cache_key(resolved_identifier: str, record_fingerprint: str) -> str:
    """Join identifier and fingerprint. No escaping is applied."""
    return f"{resolved_identifier}{KEY_DELIMITER}{record_fingerprint}"
