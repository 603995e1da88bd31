from __future__ import annotations

from typing import Protocol

from messenger_relay.domain.entities.message import Message


class MessageReader(Protocol):
    async def next_after(self, username: str, cursor: int) -> Message | None:
        """Return the message with the smallest id above cursor sent by or to username."""
        ...


class MessageWriter(Protocol):
    async def append(
        self,
        sender: str,
        recipient: str,
        body: str,
        now: int,
    ) -> Message: ...
