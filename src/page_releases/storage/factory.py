"""Backend selection — done once at startup from ``StorageConfig``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from page_releases.storage.blob import BlobSnapshotBackend
from page_releases.storage.filesystem import FilesystemSnapshotBackend
from page_releases.storage.store import SnapshotStore

if TYPE_CHECKING:
    from page_releases.config import StorageConfig
    from page_releases.storage.base import SnapshotBackend

logger = logging.getLogger(__name__)


def create_backend(config: StorageConfig) -> SnapshotBackend:
    """Return the backend named by ``config.backend``."""
    match config.backend:
        case "filesystem":
            logger.info("Snapshot backend — filesystem root=%s", config.releases_dir)
            return FilesystemSnapshotBackend(config.releases_dir)
        case "blob":
            logger.info(
                "Snapshot backend — blob container=%s prefix=%s", config.container, config.prefix
            )
            return BlobSnapshotBackend.from_config(config)
    raise ValueError(f"Unknown STORAGE_BACKEND: {config.backend!r}")


async def init_storage(config: StorageConfig) -> SnapshotStore:
    """Create the configured backend, prepare it, and wrap it in a store."""
    backend = create_backend(config)
    await backend.initialize()
    return SnapshotStore(backend, timeout=config.timeout_seconds)
