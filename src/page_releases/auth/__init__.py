"""Roles and the publish permission gate."""

from page_releases.auth.middleware import get_role, require_publisher
from page_releases.auth.roles import ROLE_PERMISSIONS, Permissions, Role, can_publish, parse_role

__all__ = [
    "ROLE_PERMISSIONS",
    "Permissions",
    "Role",
    "can_publish",
    "get_role",
    "parse_role",
    "require_publisher",
]
