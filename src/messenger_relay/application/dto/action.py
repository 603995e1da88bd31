from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from messenger_relay.application.dto.principal import Credentials
from messenger_relay.domain.entities.message import Message
from messenger_relay.domain.value_objects.enums import ResultStatus

Payload = Message | str | None


@dataclass(frozen=True, slots=True)
class ActionRequest:
    """Already-parsed request fields handed over by the transport."""

    method: str
    params: Mapping[str, str] = field(default_factory=dict)
    credentials: Credentials | None = None


@dataclass(frozen=True, slots=True)
class ActionResult:
    status: ResultStatus
    payload: Payload = None
