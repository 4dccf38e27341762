"""Publish pipeline: diff engine, version calculator, changelog and orchestrator."""

from page_releases.publish.changelog import NO_CHANGES, render_changelog
from page_releases.publish.diff import diff_pages
from page_releases.publish.orchestrator import PublishOrchestrator, validate_draft
from page_releases.publish.semver import apply_bump, bump_class, next_version

__all__ = [
    "NO_CHANGES",
    "PublishOrchestrator",
    "apply_bump",
    "bump_class",
    "diff_pages",
    "next_version",
    "render_changelog",
    "validate_draft",
]
