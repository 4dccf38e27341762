"""Data models for pages, diffs, versions and snapshots."""

from page_releases.models.changes import Change, ChangeType, DiffResult
from page_releases.models.page import (
    EMPTY_PAGE,
    CtaProps,
    CtaSection,
    Feature,
    FeatureGridProps,
    FeatureGridSection,
    HeroProps,
    HeroSection,
    Page,
    Section,
    SectionType,
    TestimonialProps,
    TestimonialSection,
)
from page_releases.models.snapshot import PublishResult, Snapshot
from page_releases.models.version import INITIAL_VERSION, BumpClass, Version

__all__ = [
    "EMPTY_PAGE",
    "INITIAL_VERSION",
    "BumpClass",
    "Change",
    "ChangeType",
    "CtaProps",
    "CtaSection",
    "DiffResult",
    "Feature",
    "FeatureGridProps",
    "FeatureGridSection",
    "HeroProps",
    "HeroSection",
    "Page",
    "PublishResult",
    "Section",
    "SectionType",
    "Snapshot",
    "TestimonialProps",
    "TestimonialSection",
    "Version",
]
