"""Version calculator — maps a diff to a bump class and applies it."""

from __future__ import annotations

from typing import TYPE_CHECKING

from page_releases.models.changes import ChangeType
from page_releases.models.version import BumpClass, Version

if TYPE_CHECKING:
    from page_releases.models.changes import DiffResult

_MAJOR_CHANGES = frozenset({ChangeType.REMOVED, ChangeType.TYPE_CHANGED})


def bump_class(diff: DiffResult) -> BumpClass:
    """Return the bump class for a diff; the highest-ranked change wins.

    Removals and type changes force ``major``, additions ``minor``, content
    edits ``patch``. An empty diff is ``none``.
    """
    if not diff.has_changes:
        return BumpClass.NONE

    level = BumpClass.PATCH
    for change in diff.changes:
        if change.change_type in _MAJOR_CHANGES:
            return BumpClass.MAJOR
        if change.change_type == ChangeType.ADDED:
            level = BumpClass.MINOR
    return level


def apply_bump(previous: Version | str, bump: BumpClass) -> Version:
    """Advance ``previous`` by ``bump``. E.g. ``apply_bump("1.2.3", MINOR) == 1.3.0``."""
    if isinstance(previous, str):
        previous = Version.parse(previous)

    match bump:
        case BumpClass.MAJOR:
            return Version(previous.major + 1, 0, 0)
        case BumpClass.MINOR:
            return Version(previous.major, previous.minor + 1, 0)
        case BumpClass.PATCH:
            return Version(previous.major, previous.minor, previous.patch + 1)
        case BumpClass.NONE:
            return previous
    raise ValueError(f"Unknown bump class: {bump!r}")


def next_version(previous: Version, diff: DiffResult) -> tuple[BumpClass, Version]:
    bump = bump_class(diff)
    return bump, apply_bump(previous, bump)
