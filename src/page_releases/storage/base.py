"""Capability set every snapshot storage backend provides."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SnapshotBackend(Protocol):
    """Raw, write-once storage of serialized snapshots keyed by slug and version.

    Backends raise ``StoreUnavailableError`` when unreachable and
    ``SnapshotNotFoundError`` from ``read`` when the entry does not exist.
    """

    async def initialize(self) -> None:
        """Prepare the backend (create root directory or container)."""
        ...

    async def list_versions(self, slug: str) -> list[str]:
        """Return the version names stored under ``slug`` (unordered)."""
        ...

    async def read(self, slug: str, version: str) -> bytes:
        """Return the serialized snapshot for ``slug``/``version``."""
        ...

    async def create_if_absent(self, slug: str, version: str, data: bytes) -> bool:
        """Atomically store ``data``; return False if the entry already exists."""
        ...

    async def close(self) -> None:
        """Release any underlying client."""
        ...
