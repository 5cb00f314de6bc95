"""Artifact backend protocol shared by the memory, disk and Redis stores."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ArtifactBackend(Protocol):
    """Opaque key-value capability. Either method may raise on backend failure."""

    async def get(self, key: str) -> bytes | None: ...

    async def put(self, key: str, data: bytes, ttl_seconds: float) -> None: ...
