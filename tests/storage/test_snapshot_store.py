"""Tests for SnapshotStore over the in-memory and filesystem backends."""

from __future__ import annotations

import asyncio
import json
from datetime import UTC, datetime

import pytest

from page_releases.errors import (
    SnapshotNotFoundError,
    StoreUnavailableError,
    VersionConflictError,
)
from page_releases.models.version import Version
from page_releases.storage.filesystem import FilesystemSnapshotBackend
from page_releases.storage.store import SnapshotStore
from tests.factories import MemoryBackend, hero, make_page


class _SlowBackend(MemoryBackend):
    async def list_versions(self, slug: str) -> list[str]:
        await asyncio.sleep(5)
        return []


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def store(backend: MemoryBackend) -> SnapshotStore:
    return SnapshotStore(backend, timeout=1.0)


async def test_write_serializes_full_snapshot(store, backend):
    published_at = datetime(2026, 1, 15, tzinfo=UTC)
    page = make_page(hero())

    snapshot = await store.write("home", Version(1, 0, 0), page, "- Added hero section", published_at=published_at)

    raw = json.loads(backend.objects[("home", "1.0.0")])
    assert set(raw) == {"version", "document", "changelog", "publishedAt"}
    assert raw["version"] == "1.0.0"
    assert raw["changelog"] == "- Added hero section"
    assert snapshot.document == page
    assert snapshot.published_at == published_at


async def test_write_existing_version_conflicts(store):
    page = make_page(hero())
    await store.write("home", "1.0.0", page, "first")

    with pytest.raises(VersionConflictError) as exc_info:
        await store.write("home", "1.0.0", make_page(hero(heading="Other")), "second")

    assert exc_info.value.version == "1.0.0"
    assert (await store.get("home", "1.0.0")).changelog == "first"


async def test_get_latest_uses_numeric_ordering(store):
    """Given 0.9.0, 0.10.0 and 1.0.0 the latest is 1.0.0."""
    for version in ["0.10.0", "1.0.0", "0.9.0"]:
        await store.write("home", version, make_page(hero(heading=version)), version)

    latest = await store.get_latest("home")

    assert latest is not None
    assert latest.version == "1.0.0"


async def test_double_digit_major_beats_single_digit(store):
    for version in ["9.0.0", "10.0.0"]:
        await store.write("home", version, make_page(hero()), version)
    assert (await store.latest_version("home")) == Version(10, 0, 0)


async def test_get_latest_none_when_no_snapshots(store):
    assert await store.get_latest("home") is None


async def test_list_versions_ignores_non_version_names(store, backend):
    await store.write("home", "0.1.0", make_page(hero()), "x")
    backend.objects[("home", "latest")] = b"{}"
    backend.objects[("home", "1.0")] = b"{}"

    assert await store.list_versions("home") == [Version(0, 1, 0)]


async def test_get_missing_version_raises_not_found(store):
    with pytest.raises(SnapshotNotFoundError):
        await store.get("home", "3.0.0")


async def test_corrupt_snapshot_is_unavailable(store, backend):
    backend.objects[("home", "1.0.0")] = b"not json"
    with pytest.raises(StoreUnavailableError):
        await store.get_latest("home")


async def test_timeout_surfaces_as_unavailable():
    store = SnapshotStore(_SlowBackend(), timeout=0.01)
    with pytest.raises(StoreUnavailableError, match="timed out"):
        await store.get_latest("home")


async def test_close_closes_backend(store, backend):
    await store.close()
    assert backend.closed is True


async def test_filesystem_store_round_trip(tmp_path):
    store = SnapshotStore(FilesystemSnapshotBackend(tmp_path), timeout=5.0)
    page = make_page(hero())
    await store.write("home", "0.1.0", page, "- Added hero section")

    assert (tmp_path / "home" / "0.1.0.json").exists()
    latest = await store.get_latest("home")
    assert latest is not None
    assert latest.document == page
