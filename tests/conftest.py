"""Shared test fixtures."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import TracebackType
from typing import Self

import pytest

from messenger_relay.application.dto.principal import Credentials, Identity
from messenger_relay.application.exceptions import ConflictError, StorageError
from messenger_relay.domain.entities.message import Message
from messenger_relay.domain.entities.user import User
from messenger_relay.services.action_router import ActionRouter


@dataclass
class FixedClock:
    value: int = 1_700_000_000

    def now(self) -> int:
        return self.value


class FakeHasher:
    """Reversible stand-in for bcrypt so unit tests stay fast."""

    async def hash(self, password: str) -> str:
        return f"hashed:{password}"

    async def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


@dataclass
class FakeUserReader:
    _users: dict[str, str] = field(default_factory=dict)

    async def get_password_hash(self, username: str) -> str | None:
        return self._users.get(username)

    async def exists(self, username: str) -> bool:
        return username in self._users


@dataclass
class FakeUserWriter:
    _reader: FakeUserReader

    async def create(self, user: User) -> None:
        if user.username in self._reader._users:
            raise ConflictError()
        self._reader._users[user.username] = user.password_hash


@dataclass
class FakeMessageReader:
    _messages: list[Message] = field(default_factory=list)

    async def next_after(self, username: str, cursor: int) -> Message | None:
        eligible = [m for m in self._messages if m.id > cursor and m.is_visible_to(username)]
        return min(eligible, key=lambda m: m.id, default=None)


@dataclass
class FakeMessageWriter:
    _reader: FakeMessageReader
    fail: bool = False

    async def append(self, sender: str, recipient: str, body: str, now: int) -> Message:
        if self.fail:
            raise StorageError("disk I/O error")
        msg = Message(
            id=len(self._reader._messages) + 1,
            sender=sender,
            recipient=recipient,
            body=body,
            timestamp=now,
        )
        self._reader._messages.append(msg)
        return msg


@dataclass
class FakeUoW:
    """In-memory UoW for unit tests."""
    users: FakeUserReader = field(default_factory=FakeUserReader)
    users_w: FakeUserWriter | None = None
    messages: FakeMessageReader = field(default_factory=FakeMessageReader)
    messages_w: FakeMessageWriter | None = None
    _committed: bool = False
    _rolled_back: bool = False

    def __post_init__(self) -> None:
        if self.users_w is None:
            self.users_w = FakeUserWriter(self.users)
        if self.messages_w is None:
            self.messages_w = FakeMessageWriter(self.messages)

    async def commit(self) -> None:
        self._committed = True

    async def rollback(self) -> None:
        self._rolled_back = True

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            await self.rollback()


def add_user(uow: FakeUoW, username: str, password: str) -> None:
    uow.users._users[username] = f"hashed:{password}"


def make_message(
    *,
    id: int = 1,
    sender: str = "alice",
    recipient: str = "bob",
    body: str = "hi",
    timestamp: int = 1_700_000_000,
) -> Message:
    return Message(id=id, sender=sender, recipient=recipient, body=body, timestamp=timestamp)


@pytest.fixture
def uow() -> FakeUoW:
    return FakeUoW()


@pytest.fixture
def hasher() -> FakeHasher:
    return FakeHasher()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def action_router(hasher, clock) -> ActionRouter:
    return ActionRouter(hasher=hasher, clock=clock)


@pytest.fixture
def alice() -> Identity:
    return Identity(username="alice")


@pytest.fixture
def alice_credentials() -> Credentials:
    return Credentials(username="alice", password="secret1")
