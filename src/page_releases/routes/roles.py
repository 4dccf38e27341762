"""Role switch route — store the caller's role in the ``role`` cookie."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from page_releases.auth.middleware import ROLE_COOKIE
from page_releases.auth.roles import parse_role

router = APIRouter(prefix="/api", tags=["roles"])

_COOKIE_MAX_AGE = 60 * 60 * 24


def _safe_redirect(target: str) -> str:
    """Allow only site-relative paths; anything else goes to ``/``."""
    if not target.startswith("/") or target.startswith(("//", "/\\")):
        return "/"
    return target


@router.get("/set-role")
async def set_role(role: str = "viewer", redirect: str = "/") -> RedirectResponse:
    """Set the role cookie and redirect back. Unknown roles become ``viewer``."""
    response = RedirectResponse(_safe_redirect(redirect), status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        ROLE_COOKIE,
        parse_role(role).value,
        max_age=_COOKIE_MAX_AGE,
        path="/",
        samesite="lax",
    )
    return response
