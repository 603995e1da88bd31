"""Render ActionResults as HTTP responses."""
from __future__ import annotations

from fastapi import Response
from fastapi.responses import PlainTextResponse

from messenger_relay.api.v1.schemas.message import MessageResponse
from messenger_relay.application.dto.action import ActionResult
from messenger_relay.domain.entities.message import Message
from messenger_relay.domain.value_objects.enums import ResultStatus

STATUS_CODES: dict[ResultStatus, int] = {
    ResultStatus.OK: 200,
    ResultStatus.NO_CONTENT: 204,
    ResultStatus.BAD_REQUEST: 400,
    ResultStatus.UNAUTHORIZED: 401,
    # Duplicate registration has always been reported as 401.
    ResultStatus.CONFLICT: 401,
    ResultStatus.NOT_FOUND: 404,
    ResultStatus.INTERNAL_ERROR: 500,
    ResultStatus.NOT_IMPLEMENTED: 501,
}


def encode_message(msg: Message) -> str:
    return MessageResponse.from_entity(msg).model_dump_json(by_alias=True)


def encode_result(result: ActionResult) -> Response:
    status_code = STATUS_CODES[result.status]
    if result.status is ResultStatus.NO_CONTENT:
        return Response(status_code=status_code)
    if isinstance(result.payload, Message):
        return Response(
            content=encode_message(result.payload),
            status_code=status_code,
            media_type="application/json",
        )
    return PlainTextResponse(result.payload or "", status_code=status_code)
