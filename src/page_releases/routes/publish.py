"""Publish route — commit a draft as a new immutable release."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from page_releases.auth.middleware import require_publisher
from page_releases.auth.roles import Role
from page_releases.errors import DocumentValidationError

router = APIRouter(prefix="/api", tags=["publish"])


class PublishRequest(BaseModel):
    """Request body. ``draft`` is validated by the orchestrator, not here."""

    slug: str | None = None
    draft: Any = None


@router.post("/publish")
async def publish(
    request: Request,
    body: PublishRequest,
    role: Annotated[Role, Depends(require_publisher)],
) -> dict[str, Any]:
    """Diff the draft against the latest release and publish if it changed."""
    if not body.slug or body.draft is None:
        raise DocumentValidationError("Missing slug or draft in request body")
    orchestrator = request.app.state.orchestrator
    result = await orchestrator.publish(body.slug, body.draft, role=role)
    return result.model_dump(mode="json", by_alias=True)
