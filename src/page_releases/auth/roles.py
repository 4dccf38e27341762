"""Role-based permissions for previewing, editing and publishing pages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Role(StrEnum):
    VIEWER = "viewer"
    EDITOR = "editor"
    PUBLISHER = "publisher"


@dataclass(frozen=True)
class Permissions:
    can_preview: bool
    can_edit: bool
    can_publish: bool


ROLE_PERMISSIONS: dict[Role, Permissions] = {
    Role.VIEWER: Permissions(can_preview=True, can_edit=False, can_publish=False),
    Role.EDITOR: Permissions(can_preview=True, can_edit=True, can_publish=False),
    Role.PUBLISHER: Permissions(can_preview=True, can_edit=True, can_publish=True),
}


def parse_role(value: str | None) -> Role:
    """Map a raw role value to a Role, defaulting to the least privileged one."""
    try:
        return Role(value) if value else Role.VIEWER
    except ValueError:
        return Role.VIEWER


def can_publish(role: Role | None) -> bool:
    return role is not None and ROLE_PERMISSIONS[role].can_publish
