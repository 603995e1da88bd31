from __future__ import annotations

from sqlalchemy import BigInteger, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from messenger_relay.infrastructure.db.base import Base


class MessageModel(Base):
    __tablename__ = "messages"

    # SQLite only autoincrements a column declared exactly as INTEGER PRIMARY KEY.
    id: Mapped[int] = mapped_column(
        "message_id",
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    sender: Mapped[str] = mapped_column("from", String(40), nullable=False)
    recipient: Mapped[str] = mapped_column("to", String(40), nullable=False)
    body: Mapped[str] = mapped_column("message", Text, nullable=False)
    timestamp: Mapped[int] = mapped_column("date", BigInteger, nullable=False)

    __table_args__ = (
        Index("ix_messages_from_timeline", "from", "message_id"),
        Index("ix_messages_to_timeline", "to", "message_id"),
        {"sqlite_autoincrement": True},
    )
