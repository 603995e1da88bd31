from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from messenger_relay.application.exceptions import ConflictError
from messenger_relay.domain.entities.user import User
from messenger_relay.infrastructure.db.errors import storage_errors
from messenger_relay.infrastructure.db.mappers import user as mapper
from messenger_relay.infrastructure.db.models.user import UserModel


class UserReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_password_hash(self, username: str) -> str | None:
        stmt = select(UserModel.password_hash).where(UserModel.username == username)
        with storage_errors():
            result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists(self, username: str) -> bool:
        stmt = select(UserModel.username).where(UserModel.username == username).limit(1)
        with storage_errors():
            result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None


class UserWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, user: User) -> None:
        self._session.add(mapper.entity_to_model(user))
        with storage_errors():
            try:
                await self._session.flush()
            except IntegrityError as exc:
                # Primary key on "user" lost a race with a concurrent registration.
                await self._session.rollback()
                raise ConflictError() from exc
