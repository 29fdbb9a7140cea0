import io
import json
from typing import Any

import pytest

import easy_request


def test_body_takes_precedence() -> None:
    body = io.BytesIO(b"stream")
    request = easy_request.Request(body=body, content=b"content", text="text", json={"a": "b"})

    assert easy_request.resolve_payload(request) == easy_request.StreamPayload(body)


def test_content_takes_precedence_over_text_and_json() -> None:
    request = easy_request.Request(content=b"content", text="text", json={"a": "b"})

    payload = easy_request.resolve_payload(request)

    assert payload == easy_request.BytesPayload(b"content")
    assert payload.content == b"content"


def test_empty_content_is_still_sent() -> None:
    request = easy_request.Request(content=b"", text="text", json={"a": "b"})

    assert easy_request.resolve_payload(request) == easy_request.BytesPayload(b"")


def test_text_takes_precedence_over_json() -> None:
    request = easy_request.Request(text="привет", json={"a": "b"})

    payload = easy_request.resolve_payload(request)

    assert payload == easy_request.TextPayload("привет")
    assert payload.content == "привет".encode("utf-8")


def test_empty_text_falls_through_to_json() -> None:
    request = easy_request.Request(text="", json={"a": "b"})

    payload = easy_request.resolve_payload(request)

    assert isinstance(payload, easy_request.JsonPayload)
    assert payload.content == b'{"a": "b"}'


@pytest.mark.parametrize("data", [0, False, "", {}, [], None])
def test_falsy_json_is_sent(data: Any) -> None:
    payload = easy_request.resolve_payload(easy_request.Request(json=data))

    assert payload == easy_request.JsonPayload(data, json.dumps(data).encode("utf-8"))


def test_no_payload() -> None:
    payload = easy_request.resolve_payload(easy_request.Request())

    assert payload == easy_request.NoPayload()
    assert payload.content is None


@pytest.mark.parametrize("data", [object(), {"a": {1, 2}}, float("nan")])
def test_serialization_error(data: Any) -> None:
    def dumps(value: Any) -> str:
        return json.dumps(value, allow_nan=False)

    with pytest.raises(easy_request.SerializationError):
        easy_request.resolve_payload(easy_request.Request(json=data), dumps=dumps)


def test_circular_json_is_serialization_error() -> None:
    data: list[Any] = []
    data.append(data)

    with pytest.raises(easy_request.SerializationError):
        easy_request.resolve_payload(easy_request.Request(json=data))
