from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from messenger_relay.domain.entities.message import Message
from messenger_relay.infrastructure.db.errors import storage_errors
from messenger_relay.infrastructure.db.mappers import message as mapper
from messenger_relay.infrastructure.db.models.message import MessageModel


class MessageReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def next_after(self, username: str, cursor: int) -> Message | None:
        stmt = (
            select(MessageModel)
            .where(
                or_(MessageModel.sender == username, MessageModel.recipient == username),
                MessageModel.id > cursor,
            )
            .order_by(MessageModel.id.asc())
            .limit(1)
        )
        with storage_errors():
            result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return mapper.model_to_entity(model) if model else None


class MessageWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def append(
        self,
        sender: str,
        recipient: str,
        body: str,
        now: int,
    ) -> Message:
        """Insert a message; the database assigns its id."""
        model = MessageModel(sender=sender, recipient=recipient, body=body, timestamp=now)
        self._session.add(model)
        with storage_errors():
            await self._session.flush()
        return mapper.model_to_entity(model)
