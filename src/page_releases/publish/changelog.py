"""Changelog renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from page_releases.models.changes import DiffResult

NO_CHANGES = "No changes."


def render_changelog(diff: DiffResult) -> str:
    """Render one ``- description`` line per change, in diff order."""
    if not diff.has_changes:
        return NO_CHANGES
    return "\n".join(f"- {change.description}" for change in diff.changes)
