from __future__ import annotations

import logging

from messenger_relay.application.exceptions import ConflictError, NotFoundError
from messenger_relay.application.uow import UnitOfWork
from messenger_relay.domain.entities.user import User

logger = logging.getLogger(__name__)

REGISTRATION_OK = "Registration successful"


async def register_user(username: str, password_hash: str, uow: UnitOfWork) -> str:
    """Create an account from an already hashed password.

    Raises ConflictError when the username is taken.
    """
    if await uow.users.exists(username):
        raise ConflictError()

    await uow.users_w.create(User(username=username, password_hash=password_hash))
    await uow.commit()

    logger.info("User %s registered", username)
    return REGISTRATION_OK


async def get_user(username: str, uow: UnitOfWork) -> str:
    if not await uow.users.exists(username):
        raise NotFoundError()
    return username
