"""Size limits for request fields, in UTF-8 bytes."""
from __future__ import annotations

USERNAME_MAX_BYTES = 40
PASSWORD_MAX_BYTES = 256
MESSAGE_MAX_BYTES = 4096
ACTION_MAX_BYTES = 40

CURSOR_MAX = 2**63 - 1


def byte_length(value: str) -> int:
    return len(value.encode("utf-8"))
