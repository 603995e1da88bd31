from __future__ import annotations

import json

from messenger_relay.api.v1.encoder import encode_message, encode_result
from messenger_relay.application.dto.action import ActionResult
from messenger_relay.domain.value_objects.enums import ResultStatus
from tests.conftest import make_message


def test_encode_message_field_order_and_types():
    raw = encode_message(make_message(id=7, timestamp=1234))

    assert raw == '{"message_id":7,"from":"alice","to":"bob","message":"hi","time":1234}'


def test_encode_message_escapes_strings():
    body = 'say "hi"\n\\ {"x": 1}'
    raw = encode_message(make_message(body=body, sender='ev"il'))

    decoded = json.loads(raw)
    assert decoded["message"] == body
    assert decoded["from"] == 'ev"il'


def test_encode_result_message_is_json():
    response = encode_result(ActionResult(ResultStatus.OK, make_message()))

    assert response.status_code == 200
    assert response.media_type == "application/json"
    assert json.loads(response.body)["message_id"] == 1


def test_encode_result_no_content_is_empty():
    response = encode_result(ActionResult(ResultStatus.NO_CONTENT))

    assert response.status_code == 204
    assert response.body == b""


def test_encode_result_conflict_keeps_legacy_status():
    response = encode_result(ActionResult(ResultStatus.CONFLICT, "User already exist"))

    assert response.status_code == 401
    assert response.body == b"User already exist"


def test_every_status_has_a_code():
    for status in ResultStatus:
        encode_result(ActionResult(status, "x"))
