"""FastAPI application — publish and release lookup API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from page_releases.config import load_settings
from page_releases.errors import (
    DocumentValidationError,
    PublishError,
    PublishNotAuthorizedError,
    SnapshotNotFoundError,
    StoreUnavailableError,
    VersionConflictError,
)
from page_releases.logging import configure_logging
from page_releases.publish.orchestrator import PublishOrchestrator
from page_releases.routes import publish, releases, roles
from page_releases.storage.factory import init_storage

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)

_ERROR_STATUS: dict[type[PublishError], int] = {
    DocumentValidationError: status.HTTP_400_BAD_REQUEST,
    PublishNotAuthorizedError: status.HTTP_403_FORBIDDEN,
    SnapshotNotFoundError: status.HTTP_404_NOT_FOUND,
    VersionConflictError: status.HTTP_409_CONFLICT,
    StoreUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the store and orchestrator on startup; close the backend on shutdown."""
    settings = load_settings()
    configure_logging(settings.app.log_level)

    store = await init_storage(settings.storage)
    app.state.settings = settings
    app.state.store = store
    app.state.orchestrator = PublishOrchestrator(store)
    logger.info("API started — env=%s backend=%s", settings.app.env, settings.storage.backend)

    yield

    await store.close()
    logger.info("API shutdown complete")


async def publish_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate pipeline errors into JSON responses."""
    status_code = _ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    body: dict[str, object] = {"error": str(exc), "kind": type(exc).__name__}
    if isinstance(exc, DocumentValidationError):
        body["details"] = exc.details
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.warning("Request failed — path=%s error=%s", request.url.path, exc)
    return JSONResponse(status_code=status_code, content=body)


def create_app() -> FastAPI:
    app = FastAPI(title="Page Releases", lifespan=lifespan)
    app.add_exception_handler(PublishError, publish_error_handler)
    app.include_router(publish.router)
    app.include_router(releases.router)
    app.include_router(roles.router)
    return app


def main() -> None:
    """Entry point for the API server."""
    settings = load_settings()
    uvicorn.run(
        "page_releases.app:create_app",
        factory=True,
        host=settings.app.host,
        port=settings.app.port,
    )


if __name__ == "__main__":
    main()
