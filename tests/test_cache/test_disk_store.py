"""Tests for the SQLite artifact store."""

import asyncio
import time

from ogcache.cache.disk import DiskStore
from ogcache.cache.entry import ArtifactEntry


class TestDiskStore:
    async def test_put_get(self, tmp_path, sample_image_bytes):
        store = DiskStore(db_path=tmp_path / "artifacts.db")
        try:
            await store.put("/blog/foo:0011aabb", sample_image_bytes, ttl_seconds=60)
            assert await store.get("/blog/foo:0011aabb") == sample_image_bytes
        finally:
            store.close()

    async def test_get_miss(self, tmp_path):
        store = DiskStore(db_path=tmp_path / "artifacts.db")
        try:
            assert await store.get("nonexistent") is None
        finally:
            store.close()

    def test_expired_entry_returns_none(self, tmp_path):
        store = DiskStore(db_path=tmp_path / "artifacts.db")
        try:
            store.set_entry(
                ArtifactEntry(key="k1", data=b"old", created_at=time.time() - 100, ttl_seconds=1)
            )
            assert store.get_entry("k1") is None
            assert store.entry_count == 0
        finally:
            store.close()

    def test_persists_across_instances(self, tmp_path):
        db_path = tmp_path / "artifacts.db"
        store = DiskStore(db_path=db_path)
        store.set_entry(ArtifactEntry(key="k1", data=b"persisted"))
        store.close()

        reopened = DiskStore(db_path=db_path)
        try:
            assert reopened.get_entry("k1").data == b"persisted"
        finally:
            reopened.close()

    def test_last_write_wins(self, tmp_path):
        store = DiskStore(db_path=tmp_path / "artifacts.db")
        try:
            store.set_entry(ArtifactEntry(key="k1", data=b"first"))
            store.set_entry(ArtifactEntry(key="k1", data=b"second"))
            assert store.get_entry("k1").data == b"second"
            assert store.entry_count == 1
        finally:
            store.close()

    def test_clear_and_stats(self, tmp_path):
        store = DiskStore(db_path=tmp_path / "artifacts.db")
        try:
            store.set_entry(ArtifactEntry(key="k1", data=b"x" * 100))
            store.set_entry(ArtifactEntry(key="k2", data=b"y" * 100))
            assert store.entry_count == 2
            assert store.size_mb > 0
            assert store.clear() == 2
            assert store.entry_count == 0
        finally:
            store.close()

    def test_lru_eviction_when_full(self, tmp_path):
        store = DiskStore(db_path=tmp_path / "artifacts.db", max_size_mb=1 / 1024)
        try:
            store.set_entry(ArtifactEntry(key="a", data=b"a" * 600))
            store.set_entry(ArtifactEntry(key="b", data=b"b" * 600))
            assert store.get_entry("a") is None
            assert store.get_entry("b") is not None
        finally:
            store.close()

    async def test_concurrent_puts_and_gets(self, tmp_path):
        store = DiskStore(db_path=tmp_path / "artifacts.db")
        try:
            keys = [f"/blog/{i}:0000000{i}" for i in range(8)]
            await asyncio.gather(
                *(store.put(key, key.encode(), ttl_seconds=60) for key in keys)
            )
            results = await asyncio.gather(*(store.get(key) for key in keys))
            assert results == [key.encode() for key in keys]
            assert store.entry_count == len(keys)
        finally:
            store.close()
