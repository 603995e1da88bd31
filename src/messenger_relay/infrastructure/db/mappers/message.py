from __future__ import annotations

from messenger_relay.domain.entities.message import Message
from messenger_relay.infrastructure.db.models.message import MessageModel


def model_to_entity(model: MessageModel) -> Message:
    return Message(
        id=model.id,
        sender=model.sender,
        recipient=model.recipient,
        body=model.body,
        timestamp=model.timestamp,
    )
