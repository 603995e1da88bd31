from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Credentials:
    """Username/password pair taken from a basic authentication header."""

    username: str
    password: str


@dataclass(frozen=True, slots=True)
class Identity:
    """Caller identity established by a successful authentication."""

    username: str
