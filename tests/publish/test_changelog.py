"""Tests for the changelog renderer."""

from page_releases.models.changes import Change, ChangeType, DiffResult
from page_releases.publish.changelog import NO_CHANGES, render_changelog


def test_empty_diff_renders_sentinel():
    assert render_changelog(DiffResult()) == NO_CHANGES == "No changes."


def test_one_line_per_change_in_order():
    diff = DiffResult(
        changes=(
            Change(section_id="a", change_type=ChangeType.ADDED, description="Added hero section"),
            Change(section_id="b", change_type=ChangeType.REMOVED, description="Removed cta section"),
        )
    )
    assert render_changelog(diff) == "- Added hero section\n- Removed cta section"
