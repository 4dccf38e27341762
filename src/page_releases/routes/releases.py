"""Release routes — read the latest or a historical snapshot for a slug."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, HTTPException, Path, Request, status

from page_releases.errors import SnapshotNotFoundError
from page_releases.models.page import SLUG_PATTERN
from page_releases.models.version import Version

router = APIRouter(prefix="/api/releases", tags=["releases"])

SlugPath = Annotated[str, Path(pattern=SLUG_PATTERN)]


@router.get("/{slug}")
async def latest_release(request: Request, slug: SlugPath) -> dict[str, Any]:
    """Return the latest published snapshot for a slug."""
    store = request.app.state.store
    snapshot = await store.get_latest(slug)
    if snapshot is None:
        raise SnapshotNotFoundError(slug)
    return snapshot.model_dump(mode="json", by_alias=True)


@router.get("/{slug}/versions")
async def list_releases(request: Request, slug: SlugPath) -> dict[str, Any]:
    store = request.app.state.store
    versions = await store.list_versions(slug)
    return {"slug": slug, "versions": [str(v) for v in versions]}


@router.get("/{slug}/{version}")
async def get_release(request: Request, slug: SlugPath, version: str) -> dict[str, Any]:
    """Return the snapshot published under a specific version."""
    try:
        parsed = Version.parse(version)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    store = request.app.state.store
    snapshot = await store.get(slug, parsed)
    return snapshot.model_dump(mode="json", by_alias=True)
