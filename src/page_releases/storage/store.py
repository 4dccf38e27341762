"""Snapshot store — write-once persistence and latest-version resolution."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TypeVar

from pydantic import ValidationError

from page_releases.errors import StoreUnavailableError, VersionConflictError
from page_releases.models.snapshot import Snapshot
from page_releases.models.version import Version

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from page_releases.models.page import Page
    from page_releases.storage.base import SnapshotBackend

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class SnapshotStore:
    """Immutable ``(slug, version) -> Snapshot`` mapping over a storage backend.

    Every backend call is bounded by ``timeout`` seconds; expiry surfaces as
    ``StoreUnavailableError``, never as "no snapshot exists".
    """

    def __init__(self, backend: SnapshotBackend, *, timeout: float | None = 10.0) -> None:
        self._backend = backend
        self._timeout = timeout

    @property
    def backend(self) -> SnapshotBackend:
        return self._backend

    async def _bounded(self, operation: str, awaitable: Awaitable[_T]) -> _T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self._timeout)
        except TimeoutError as exc:
            raise StoreUnavailableError(
                f"Storage {operation} timed out after {self._timeout}s"
            ) from exc

    async def list_versions(self, slug: str) -> list[Version]:
        """Return every stored version for ``slug`` in ascending version order."""
        names = await self._bounded("list", self._backend.list_versions(slug))
        versions: list[Version] = []
        for name in names:
            try:
                versions.append(Version.parse(name))
            except ValueError:
                logger.debug("Ignoring non-version entry — slug=%s name=%s", slug, name)
        return sorted(versions)

    async def latest_version(self, slug: str) -> Version | None:
        versions = await self.list_versions(slug)
        return versions[-1] if versions else None

    async def get(self, slug: str, version: Version | str) -> Snapshot:
        """Read one snapshot. Raises ``SnapshotNotFoundError`` if it does not exist."""
        data = await self._bounded("read", self._backend.read(slug, str(version)))
        try:
            return Snapshot.model_validate_json(data)
        except ValidationError as exc:
            raise StoreUnavailableError(f"Snapshot {slug}@{version} is unreadable: {exc}") from exc

    async def get_latest(self, slug: str) -> Snapshot | None:
        """Return the snapshot with the highest version for ``slug``, or None."""
        latest = await self.latest_version(slug)
        if latest is None:
            return None
        return await self.get(slug, latest)

    async def write(
        self,
        slug: str,
        version: Version | str,
        document: Page,
        changelog: str,
        *,
        published_at: datetime | None = None,
    ) -> Snapshot:
        """Persist a new snapshot. Raises ``VersionConflictError`` rather than overwrite."""
        snapshot = Snapshot(
            version=str(version),
            document=document,
            changelog=changelog,
            published_at=published_at or datetime.now(UTC),
        )
        data = snapshot.model_dump_json(by_alias=True, indent=2).encode("utf-8")
        created = await self._bounded(
            "write", self._backend.create_if_absent(slug, snapshot.version, data)
        )
        if not created:
            raise VersionConflictError(slug, snapshot.version)
        logger.info("Snapshot written — slug=%s version=%s", slug, snapshot.version)
        return snapshot

    async def close(self) -> None:
        await self._backend.close()
