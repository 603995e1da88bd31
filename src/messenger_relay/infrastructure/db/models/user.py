from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from messenger_relay.infrastructure.db.base import Base


class UserModel(Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column("user", String(40), primary_key=True)
    password_hash: Mapped[str] = mapped_column("pass_hash", String(256), nullable=False)
