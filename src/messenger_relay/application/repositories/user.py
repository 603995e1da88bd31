from __future__ import annotations

from typing import Protocol

from messenger_relay.domain.entities.user import User


class UserReader(Protocol):
    async def get_password_hash(self, username: str) -> str | None: ...

    async def exists(self, username: str) -> bool: ...


class UserWriter(Protocol):
    async def create(self, user: User) -> None:
        """Insert a user row. Raise ConflictError if the username is taken."""
        ...
