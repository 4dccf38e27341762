"""Page document model — an ordered list of typed sections."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

SLUG_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_-]*$"


class SectionType(StrEnum):
    HERO = "hero"
    FEATURE_GRID = "featureGrid"
    TESTIMONIAL = "testimonial"
    CTA = "cta"


class HeroProps(BaseModel):
    model_config = ConfigDict(frozen=True)

    heading: str = Field(min_length=1)
    subheading: str | None = None


class Feature(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    body: str


class FeatureGridProps(BaseModel):
    model_config = ConfigDict(frozen=True)

    features: tuple[Feature, ...] = ()


class TestimonialProps(BaseModel):
    model_config = ConfigDict(frozen=True)

    quote: str = Field(min_length=1)
    author: str = Field(min_length=1)


class CtaProps(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str = Field(min_length=1)
    url: str

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        if value.startswith("/"):
            return value
        parsed = urlparse(value)
        if parsed.scheme in ("http", "https") and parsed.netloc:
            return value
        raise ValueError("Must be an absolute http(s) URL or a site-relative path")


class _SectionBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)


class HeroSection(_SectionBase):
    type: Literal["hero"] = "hero"
    props: HeroProps


class FeatureGridSection(_SectionBase):
    type: Literal["featureGrid"] = "featureGrid"
    props: FeatureGridProps


class TestimonialSection(_SectionBase):
    type: Literal["testimonial"] = "testimonial"
    props: TestimonialProps


class CtaSection(_SectionBase):
    type: Literal["cta"] = "cta"
    props: CtaProps


Section = Annotated[
    HeroSection | FeatureGridSection | TestimonialSection | CtaSection,
    Field(discriminator="type"),
]


class Page(BaseModel):
    """A publishable page. ``slug`` keys its snapshot history."""

    model_config = ConfigDict(frozen=True)

    id: str
    slug: str = Field(pattern=SLUG_PATTERN)
    title: str
    sections: tuple[Section, ...] = ()

    @model_validator(mode="after")
    def _check_unique_section_ids(self) -> Page:
        seen: set[str] = set()
        for section in self.sections:
            if section.id in seen:
                raise ValueError(f"Duplicate section id: {section.id}")
            seen.add(section.id)
        return self


EMPTY_PAGE = Page(id="", slug="empty", title="")
