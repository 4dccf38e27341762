"""Snapshot storage: the store and its interchangeable backends."""

from page_releases.storage.base import SnapshotBackend
from page_releases.storage.blob import BlobSnapshotBackend
from page_releases.storage.factory import create_backend, init_storage
from page_releases.storage.filesystem import FilesystemSnapshotBackend
from page_releases.storage.store import SnapshotStore

__all__ = [
    "BlobSnapshotBackend",
    "FilesystemSnapshotBackend",
    "SnapshotBackend",
    "SnapshotStore",
    "create_backend",
    "init_storage",
]
