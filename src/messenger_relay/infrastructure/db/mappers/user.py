from __future__ import annotations

from messenger_relay.domain.entities.user import User
from messenger_relay.infrastructure.db.models.user import UserModel


def entity_to_model(entity: User) -> UserModel:
    return UserModel(
        username=entity.username,
        password_hash=entity.password_hash,
    )
