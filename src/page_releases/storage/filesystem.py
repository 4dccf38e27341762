"""Local filesystem backend — ``<root>/<slug>/<version>.json``."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import tempfile
from pathlib import Path

from page_releases.errors import SnapshotNotFoundError, StoreUnavailableError

logger = logging.getLogger(__name__)

_SUFFIX = ".json"


class FilesystemSnapshotBackend:
    """Stores each snapshot as one JSON file in a per-slug directory."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    def _path(self, slug: str, version: str) -> Path:
        return self._root / slug / f"{version}{_SUFFIX}"

    async def initialize(self) -> None:
        try:
            await asyncio.to_thread(self._root.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot create {self._root}: {exc}") from exc

    async def list_versions(self, slug: str) -> list[str]:
        return await asyncio.to_thread(self._list_versions, slug)

    async def read(self, slug: str, version: str) -> bytes:
        return await asyncio.to_thread(self._read, slug, version)

    async def create_if_absent(self, slug: str, version: str, data: bytes) -> bool:
        return await asyncio.to_thread(self._create_if_absent, slug, version, data)

    async def close(self) -> None:
        return None

    def _list_versions(self, slug: str) -> list[str]:
        directory = self._root / slug
        try:
            entries = list(directory.iterdir())
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot list {directory}: {exc}") from exc
        return [entry.name[: -len(_SUFFIX)] for entry in entries if entry.name.endswith(_SUFFIX)]

    def _read(self, slug: str, version: str) -> bytes:
        path = self._path(slug, version)
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise SnapshotNotFoundError(slug, version) from exc
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot read {path}: {exc}") from exc

    def _create_if_absent(self, slug: str, version: str, data: bytes) -> bool:
        """Write to a temp file, then hard-link it into place.

        ``os.link`` fails with ``FileExistsError`` if the target exists, which
        makes the create conditional and keeps partial files invisible.
        """
        path = self._path(slug, version)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{version}.", suffix=".tmp")
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot prepare {path}: {exc}") from exc

        try:
            with os.fdopen(fd, "wb") as tmp:
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.link(tmp_name, path)
        except FileExistsError:
            logger.info("Snapshot already exists — path=%s", path)
            return False
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot write {path}: {exc}") from exc
        finally:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)

        logger.debug("Snapshot file written — path=%s bytes=%d", path, len(data))
        return True
