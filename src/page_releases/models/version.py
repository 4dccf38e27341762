"""Semantic version value type and bump classes."""

from __future__ import annotations

import re
from enum import StrEnum
from typing import NamedTuple

_VERSION_RE = re.compile(r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)$")


class BumpClass(StrEnum):
    NONE = "none"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"


class Version(NamedTuple):
    """``(major, minor, patch)``; ordering is tuple ordering, never string ordering."""

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse ``"M.m.p"``. Raises ``ValueError`` for anything else."""
        match = _VERSION_RE.match(text)
        if match is None:
            raise ValueError(f"Not a version string: {text!r}")
        return cls(*(int(part) for part in match.groups()))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


INITIAL_VERSION = Version(0, 0, 0)
