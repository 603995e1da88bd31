from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from messenger_relay.infrastructure.db import models  # noqa: F401
from messenger_relay.infrastructure.db.base import Base
from messenger_relay.infrastructure.db.uow import SqlAlchemyUoW

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict[str, Any]:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return {"pool_pre_ping": True}
    options: dict[str, Any] = {"connect_args": {"check_same_thread": False, "timeout": 30}}
    if parsed.database in (None, "", ":memory:"):
        # Every session must see the same in-memory database.
        options["poolclass"] = StaticPool
    return options


class Database:
    """Owns the engine and session factory for one application instance."""

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = url
        self.engine = create_async_engine(url, echo=echo, **_engine_options(url))
        self.sessionmaker = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

    async def create_schema(self) -> None:
        """Create the users and messages tables if they do not exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database ready at %s", self.engine.url.render_as_string(hide_password=True))

    async def ping(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def unit_of_work(self) -> AsyncIterator[SqlAlchemyUoW]:
        async with self.sessionmaker() as session:
            yield SqlAlchemyUoW(session)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database connections closed")
