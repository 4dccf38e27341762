"""Error taxonomy for the publish pipeline and snapshot store."""

from __future__ import annotations

from typing import Any


class PublishError(Exception):
    """Base class for all publish pipeline failures."""


class DocumentValidationError(PublishError):
    """The candidate draft is structurally invalid and was rejected before diffing."""

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.details = details or []


class PublishNotAuthorizedError(PublishError):
    """Publish was invoked without a role that is allowed to publish."""


class StoreUnavailableError(PublishError):
    """The storage backend is unreachable or timed out. Transient, retryable."""


class VersionConflictError(PublishError):
    """A snapshot already exists for the version being written."""

    def __init__(self, slug: str, version: str) -> None:
        super().__init__(f"Snapshot {slug}@{version} already exists")
        self.slug = slug
        self.version = version


class SnapshotNotFoundError(PublishError):
    """No snapshot is stored for the requested slug/version."""

    def __init__(self, slug: str, version: str | None = None) -> None:
        target = f"{slug}@{version}" if version else slug
        super().__init__(f"No snapshot found for {target}")
        self.slug = slug
        self.version = version
