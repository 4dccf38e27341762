"""Tests for the diff engine."""

import pytest

from page_releases.models.changes import ChangeType
from page_releases.models.page import EMPTY_PAGE, CtaSection, HeroProps, HeroSection
from page_releases.publish.diff import diff_pages
from tests.factories import cta, features, hero, make_page, quote_section


@pytest.fixture
def published():
    return make_page(hero("s1"), features("s2"), quote_section("s3"), cta("s4"))


def test_identical_pages_have_no_changes(published):
    result = diff_pages(published, published)
    assert result.has_changes is False
    assert result.changes == ()


def test_equal_but_distinct_props_are_not_changes(published):
    """Props are compared structurally, not by identity."""
    copy = make_page(hero("s1"), features("s2"), quote_section("s3"), cta("s4"))
    assert copy.sections[0] is not published.sections[0]
    assert diff_pages(copy, published).has_changes is False


def test_diff_against_empty_page_adds_every_section_in_order(published):
    result = diff_pages(published, EMPTY_PAGE)

    assert result.has_changes is True
    assert [c.change_type for c in result.changes] == [ChangeType.ADDED] * 4
    assert [c.section_id for c in result.changes] == ["s1", "s2", "s3", "s4"]
    assert result.changes[0].description == "Added hero section"
    assert result.changes[1].description == "Added featureGrid section"


def test_reordering_sections_is_not_a_change(published):
    reordered = make_page(cta("s4"), hero("s1"), quote_section("s3"), features("s2"))
    assert diff_pages(reordered, published).has_changes is False


def test_content_change(published):
    edited = make_page(hero("s1", heading="New heading"), features("s2"), quote_section("s3"), cta("s4"))

    result = diff_pages(edited, published)

    assert len(result.changes) == 1
    change = result.changes[0]
    assert change.section_id == "s1"
    assert change.change_type == ChangeType.CONTENT_CHANGED
    assert change.description == "Updated hero content"


def test_optional_prop_added_is_a_content_change():
    before = make_page(hero("s1"))
    after = make_page(hero("s1", subheading="Now with a subheading"))
    result = diff_pages(after, before)
    assert [c.change_type for c in result.changes] == [ChangeType.CONTENT_CHANGED]


def test_nested_list_change_is_a_content_change():
    before = make_page(features("s2", "A", "B"))
    after = make_page(features("s2", "B", "A"))
    result = diff_pages(after, before)
    assert [c.change_type for c in result.changes] == [ChangeType.CONTENT_CHANGED]


def test_type_change_is_never_reported_as_content_change():
    before = make_page(hero("s1"))
    after = make_page(cta("s1"))

    result = diff_pages(after, before)

    assert len(result.changes) == 1
    assert result.changes[0].change_type == ChangeType.TYPE_CHANGED
    assert result.changes[0].description == "Changed section type from hero to cta"


def test_removed_section(published):
    trimmed = make_page(hero("s1"), features("s2"), cta("s4"))

    result = diff_pages(trimmed, published)

    assert len(result.changes) == 1
    assert result.changes[0].change_type == ChangeType.REMOVED
    assert result.changes[0].section_id == "s3"
    assert result.changes[0].description == "Removed testimonial section"


def test_candidate_changes_precede_removals(published):
    """Candidate-side changes come first in candidate order, then removals in previous order."""
    candidate = make_page(
        hero("new-hero"),
        cta("s4", label="Buy now"),
        HeroSection(id="s2", props=HeroProps(heading="Was a grid")),
    )

    result = diff_pages(candidate, published)

    assert [(c.section_id, c.change_type) for c in result.changes] == [
        ("new-hero", ChangeType.ADDED),
        ("s4", ChangeType.CONTENT_CHANGED),
        ("s2", ChangeType.TYPE_CHANGED),
        ("s1", ChangeType.REMOVED),
        ("s3", ChangeType.REMOVED),
    ]


def test_diff_is_deterministic(published):
    candidate = make_page(cta("s4"), hero("s9"))
    first = diff_pages(candidate, published)
    second = diff_pages(candidate, published)
    assert first == second


def test_has_changes_is_serialized():
    result = diff_pages(make_page(CtaSection(id="c", props=cta().props)), EMPTY_PAGE)
    dumped = result.model_dump()
    assert dumped["has_changes"] is True
    assert len(dumped["changes"]) == 1
