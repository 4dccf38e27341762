"""Tests for roles and the publish permission gate."""

from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException

from page_releases.auth.middleware import get_role, require_publisher
from page_releases.auth.roles import ROLE_PERMISSIONS, Role, can_publish, parse_role


def _request(cookies=None, headers=None):
    request = MagicMock()
    request.cookies = cookies or {}
    request.headers = headers or {}
    return request


def test_only_publisher_can_publish():
    assert [role for role in Role if ROLE_PERMISSIONS[role].can_publish] == [Role.PUBLISHER]
    assert can_publish(Role.PUBLISHER) is True
    assert can_publish(Role.EDITOR) is False
    assert can_publish(None) is False


def test_every_role_can_preview():
    assert all(ROLE_PERMISSIONS[role].can_preview for role in Role)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("publisher", Role.PUBLISHER), ("editor", Role.EDITOR), (None, Role.VIEWER), ("admin", Role.VIEWER)],
)
def test_parse_role(raw, expected):
    assert parse_role(raw) == expected


def test_get_role_prefers_cookie():
    request = _request(cookies={"role": "editor"}, headers={"X-Role": "publisher"})
    assert get_role(request) == Role.EDITOR


def test_get_role_falls_back_to_header():
    assert get_role(_request(headers={"X-Role": "publisher"})) == Role.PUBLISHER


def test_require_publisher_raises_403_for_viewer():
    with pytest.raises(HTTPException) as exc_info:
        require_publisher(_request())
    assert exc_info.value.status_code == 403


def test_require_publisher_returns_role():
    assert require_publisher(_request(cookies={"role": "publisher"})) == Role.PUBLISHER
