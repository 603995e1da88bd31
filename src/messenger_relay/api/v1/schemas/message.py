from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from messenger_relay.domain.entities.message import Message


class MessageResponse(BaseModel):
    message_id: int
    from_: str = Field(alias="from")
    to: str
    message: str
    time: int

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, msg: Message) -> MessageResponse:
        return cls(
            message_id=msg.id,
            from_=msg.sender,
            to=msg.recipient,
            message=msg.body,
            time=msg.timestamp,
        )
