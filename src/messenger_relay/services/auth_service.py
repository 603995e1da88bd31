from __future__ import annotations

from messenger_relay.application.dto.principal import Credentials, Identity
from messenger_relay.application.exceptions import UnauthorizedError
from messenger_relay.application.ports.hasher import PasswordHasher
from messenger_relay.application.uow import UnitOfWork
from messenger_relay.domain.value_objects.limits import (
    PASSWORD_MAX_BYTES,
    USERNAME_MAX_BYTES,
    byte_length,
)


async def authenticate(
    credentials: Credentials | None,
    uow: UnitOfWork,
    hasher: PasswordHasher,
) -> Identity:
    """Resolve basic-auth credentials to an identity or raise UnauthorizedError."""
    if credentials is None or not credentials.username:
        raise UnauthorizedError()
    if (
        byte_length(credentials.username) > USERNAME_MAX_BYTES
        or byte_length(credentials.password) > PASSWORD_MAX_BYTES
    ):
        raise UnauthorizedError()

    stored = await uow.users.get_password_hash(credentials.username)
    if stored is None:
        raise UnauthorizedError()
    if not await hasher.verify(credentials.password, stored):
        raise UnauthorizedError()

    return Identity(username=credentials.username)
