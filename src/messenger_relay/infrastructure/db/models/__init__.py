"""Import all models so Base.metadata knows every table."""
from messenger_relay.infrastructure.db.models.message import MessageModel
from messenger_relay.infrastructure.db.models.user import UserModel

__all__ = [
    "MessageModel",
    "UserModel",
]
