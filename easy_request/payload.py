"""Resolution of the request body.

A request may carry several body sources at once, only one of them is sent.
They are checked in a fixed order and the first one that is set wins:

1. ``body``, a binary stream or an iterable of bytes;
2. ``content``, raw bytes, an empty value still counts as set;
3. ``text``, a non-empty string sent as UTF-8;
4. ``json``, any value assigned explicitly, serialized when the request is sent.
"""

import collections.abc
import dataclasses
import json
from typing import IO, TYPE_CHECKING, Any

from .base import MISSING
from .errors import SerializationError

if TYPE_CHECKING:
    from .request import Request

Stream = IO[bytes] | collections.abc.Iterable[bytes]


@dataclasses.dataclass(frozen=True, slots=True)
class StreamPayload:
    stream: Stream

    @property
    def content(self) -> Stream:
        return self.stream


@dataclasses.dataclass(frozen=True, slots=True)
class BytesPayload:
    data: bytes

    @property
    def content(self) -> bytes:
        return self.data


@dataclasses.dataclass(frozen=True, slots=True)
class TextPayload:
    text: str

    @property
    def content(self) -> bytes:
        return self.text.encode("utf-8")


@dataclasses.dataclass(frozen=True, slots=True)
class JsonPayload:
    value: Any
    data: bytes

    @property
    def content(self) -> bytes:
        return self.data


@dataclasses.dataclass(frozen=True, slots=True)
class NoPayload:
    @property
    def content(self) -> None:
        return None


Payload = StreamPayload | BytesPayload | TextPayload | JsonPayload | NoPayload


def resolve_payload(
    request: "Request",
    *,
    dumps: collections.abc.Callable[[Any], str] = json.dumps,
) -> Payload:
    if request.body is not None:
        return StreamPayload(request.body)
    if request.content is not None:
        return BytesPayload(bytes(request.content))
    if request.text:
        return TextPayload(request.text)
    if request.json is not MISSING:
        return JsonPayload(request.json, serialize_json(request.json, dumps=dumps))
    return NoPayload()


def serialize_json(value: Any, *, dumps: collections.abc.Callable[[Any], str] = json.dumps) -> bytes:
    try:
        return dumps(value).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot serialize {type(value).__name__} to JSON: {e}") from e
