"""Diff result models produced by the diff engine."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, computed_field


class ChangeType(StrEnum):
    ADDED = "added"
    REMOVED = "removed"
    TYPE_CHANGED = "type-changed"
    CONTENT_CHANGED = "content-changed"


class Change(BaseModel):
    """A single categorized change to one section."""

    model_config = ConfigDict(frozen=True)

    section_id: str
    change_type: ChangeType
    description: str


class DiffResult(BaseModel):
    """Ordered changes between a candidate page and the previously published one."""

    model_config = ConfigDict(frozen=True)

    changes: tuple[Change, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_changes(self) -> bool:
        return len(self.changes) > 0
