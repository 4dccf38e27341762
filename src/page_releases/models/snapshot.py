"""Snapshot and publish result models — immutable records of a publish."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from page_releases.models.page import Page
from page_releases.models.version import BumpClass, Version


class Snapshot(BaseModel):
    """An immutable copy of a page as published under a version."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    version: str
    document: Page
    changelog: str
    published_at: datetime

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: str) -> str:
        Version.parse(value)
        return value


class PublishResult(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    version: str
    changelog: str
    idempotent: bool
    bump: BumpClass
