"""Diff engine — compares a candidate page against the last published page.

Sections are matched by ``id``, never by position, so reordering surviving
sections is not a change. Candidate-side changes are reported in candidate
order, followed by removals in previous order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from page_releases.models.changes import Change, ChangeType, DiffResult

if TYPE_CHECKING:
    from page_releases.models.page import Page


def diff_pages(candidate: Page, previous: Page) -> DiffResult:
    """Return the categorized changes that turn ``previous`` into ``candidate``."""
    previous_by_id = {section.id: section for section in previous.sections}
    candidate_ids = {section.id for section in candidate.sections}

    changes: list[Change] = []

    for section in candidate.sections:
        prev = previous_by_id.get(section.id)

        if prev is None:
            changes.append(
                Change(
                    section_id=section.id,
                    change_type=ChangeType.ADDED,
                    description=f"Added {section.type} section",
                )
            )
            continue

        # A type change is never also reported as a content change
        if prev.type != section.type:
            changes.append(
                Change(
                    section_id=section.id,
                    change_type=ChangeType.TYPE_CHANGED,
                    description=f"Changed section type from {prev.type} to {section.type}",
                )
            )
            continue

        if prev.props.model_dump(mode="json") != section.props.model_dump(mode="json"):
            changes.append(
                Change(
                    section_id=section.id,
                    change_type=ChangeType.CONTENT_CHANGED,
                    description=f"Updated {section.type} content",
                )
            )

    for section in previous.sections:
        if section.id not in candidate_ids:
            changes.append(
                Change(
                    section_id=section.id,
                    change_type=ChangeType.REMOVED,
                    description=f"Removed {section.type} section",
                )
            )

    return DiffResult(changes=tuple(changes))
