"""Publish orchestrator — validate, diff, version, render and commit a draft."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from page_releases.auth.roles import can_publish
from page_releases.errors import (
    DocumentValidationError,
    PublishNotAuthorizedError,
    VersionConflictError,
)
from page_releases.models.page import EMPTY_PAGE, Page
from page_releases.models.snapshot import PublishResult
from page_releases.models.version import INITIAL_VERSION, BumpClass, Version
from page_releases.publish.changelog import render_changelog
from page_releases.publish.diff import diff_pages
from page_releases.publish.semver import next_version

if TYPE_CHECKING:
    from page_releases.auth.roles import Role
    from page_releases.storage.store import SnapshotStore

logger = logging.getLogger(__name__)


def validate_draft(slug: str, draft: Page | Mapping[str, Any]) -> Page:
    """Run a draft through the page schema, whatever its origin.

    Raises ``DocumentValidationError`` if the draft does not match the schema
    or belongs to a different slug.
    """
    raw = draft.model_dump(mode="json") if isinstance(draft, Page) else draft
    try:
        page = Page.model_validate(raw)
    except ValidationError as exc:
        raise DocumentValidationError(
            "Invalid draft data",
            details=exc.errors(include_url=False, include_context=False),
        ) from exc
    if page.slug != slug:
        raise DocumentValidationError(f"Draft slug {page.slug!r} does not match {slug!r}")
    return page


class PublishOrchestrator:
    """Composes the diff engine, version calculator, changelog and store."""

    def __init__(self, store: SnapshotStore) -> None:
        self._store = store

    async def publish(
        self,
        slug: str,
        draft: Page | Mapping[str, Any],
        *,
        role: Role | None,
    ) -> PublishResult:
        """Publish ``draft`` under ``slug``.

        Publishing content identical to the latest snapshot writes nothing and
        returns that snapshot's version with ``idempotent=True``. A version
        conflict from a concurrent publisher is retried once against the new
        latest; any further conflict propagates.
        """
        if not can_publish(role):
            raise PublishNotAuthorizedError(f"Role {role!r} may not publish")

        page = validate_draft(slug, draft)

        try:
            return await self._publish_once(slug, page)
        except VersionConflictError as exc:
            logger.warning(
                "Version conflict — slug=%s version=%s; retrying against new latest",
                slug,
                exc.version,
            )
            return await self._publish_once(slug, page)

    async def _publish_once(self, slug: str, page: Page) -> PublishResult:
        latest = await self._store.get_latest(slug)
        if latest is None:
            previous_page, previous_version = EMPTY_PAGE, INITIAL_VERSION
        else:
            previous_page, previous_version = latest.document, Version.parse(latest.version)

        diff = diff_pages(page, previous_page)
        changelog = render_changelog(diff)

        if not diff.has_changes:
            logger.info("Publish no-op — slug=%s version=%s", slug, previous_version)
            return PublishResult(
                version=str(previous_version),
                changelog=changelog,
                idempotent=True,
                bump=BumpClass.NONE,
            )

        bump, version = next_version(previous_version, diff)
        await self._store.write(slug, version, page, changelog)
        logger.info(
            "Published — slug=%s version=%s bump=%s changes=%d",
            slug,
            version,
            bump,
            len(diff.changes),
        )
        return PublishResult(
            version=str(version),
            changelog=changelog,
            idempotent=False,
            bump=bump,
        )
