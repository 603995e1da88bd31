from __future__ import annotations

import logging

from messenger_relay.application.dto.principal import Identity
from messenger_relay.application.ports.clock import Clock
from messenger_relay.application.uow import UnitOfWork
from messenger_relay.domain.entities.message import Message

logger = logging.getLogger(__name__)


async def send_message(
    identity: Identity,
    recipient: str,
    body: str,
    uow: UnitOfWork,
    clock: Clock,
) -> Message:
    """Append a message from the authenticated user.

    The recipient is not checked against registered users.
    """
    msg = await uow.messages_w.append(
        sender=identity.username,
        recipient=recipient,
        body=body,
        now=clock.now(),
    )
    await uow.commit()

    logger.info("%s sent message %d to %s", msg.sender, msg.id, msg.recipient)
    return msg


async def get_next_message(
    identity: Identity,
    cursor: int,
    uow: UnitOfWork,
) -> Message | None:
    msg = await uow.messages.next_after(identity.username, cursor)
    if msg is not None:
        logger.debug("%s fetched message %d", identity.username, msg.id)
    return msg
