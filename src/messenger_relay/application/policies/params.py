from __future__ import annotations

import re
from collections.abc import Mapping

from messenger_relay.application.exceptions import BadRequestError
from messenger_relay.domain.value_objects.limits import CURSOR_MAX, byte_length

_DECIMAL = re.compile(r"[0-9]+")


def require_param(params: Mapping[str, str], name: str, max_bytes: int) -> str:
    """Return a non-empty parameter no longer than max_bytes, else raise BadRequestError."""
    value = params.get(name)
    if not value or byte_length(value) > max_bytes:
        raise BadRequestError()
    return value


def parse_cursor(raw: str | None) -> int:
    """Parse the ``last_message`` watermark.

    Only plain ASCII decimal digits count; anything else means 0.
    """
    if raw is None or not raw.isascii() or not _DECIMAL.fullmatch(raw):
        return 0
    return min(int(raw), CURSOR_MAX)
