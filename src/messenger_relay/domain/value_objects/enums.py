from __future__ import annotations

from enum import StrEnum

from messenger_relay.domain.value_objects.limits import ACTION_MAX_BYTES, byte_length


class Action(StrEnum):
    SEND_MESSAGE = "send_message"
    GET_MESSAGE = "get_message"
    REGISTER = "register"
    GET_USER = "get_user"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: str | None) -> Action:
        """Map a raw ``action`` parameter onto a known action, else UNKNOWN."""
        if not raw or byte_length(raw) > ACTION_MAX_BYTES:
            return cls.UNKNOWN
        try:
            return cls(raw)
        except ValueError:
            return cls.UNKNOWN


class ResultStatus(StrEnum):
    OK = "ok"
    NO_CONTENT = "no_content"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    NOT_IMPLEMENTED = "not_implemented"
    INTERNAL_ERROR = "internal_error"
