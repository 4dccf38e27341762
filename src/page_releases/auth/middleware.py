"""Role gate for the publish API."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from page_releases.auth.roles import Role, can_publish, parse_role

ROLE_COOKIE = "role"
ROLE_HEADER = "X-Role"


def get_role(request: Request) -> Role:
    """Read the caller's role from the ``role`` cookie or ``X-Role`` header."""
    raw = request.cookies.get(ROLE_COOKIE) or request.headers.get(ROLE_HEADER)
    return parse_role(raw)


def require_publisher(request: Request) -> Role:
    """Return the caller's role or raise HTTP 403 unless it may publish."""
    role = get_role(request)
    if not can_publish(role):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: publisher role required",
        )
    return role
