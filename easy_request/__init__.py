import re
import sys
from typing import NamedTuple

from .__version__ import __version__
from .base import DEFAULT_TIMEOUT, MAX_REDIRECTS, MISSING, USER_AGENT, Header, Method
from .client import Client
from .context import get_default_client, set_default_client, use_client
from .errors import (
    BodyReadError,
    DeserializationError,
    RequestError,
    SerializationError,
    TransportError,
    TransportErrorKind,
    UnexpectedContentTypeError,
)
from .payload import BytesPayload, JsonPayload, NoPayload, Payload, StreamPayload, TextPayload, resolve_payload
from .request import (
    Request,
    RequestOption,
    delete,
    get,
    head,
    new_request,
    options,
    patch,
    post,
    put,
    request,
)
from .request_options import (
    with_body,
    with_client,
    with_content,
    with_headers,
    with_json,
    with_params,
    with_redirects,
    with_stream,
    with_text,
    with_timeout,
    with_transport,
)
from .response import Response, ResponseBody, to_response
from .setup import setup

__all__: tuple[str, ...] = (
    "BodyReadError",
    "BytesPayload",
    "Client",
    "DEFAULT_TIMEOUT",
    "DeserializationError",
    "Header",
    "JsonPayload",
    "MAX_REDIRECTS",
    "MISSING",
    "Method",
    "NoPayload",
    "Payload",
    "Request",
    "RequestError",
    "RequestOption",
    "Response",
    "ResponseBody",
    "SerializationError",
    "StreamPayload",
    "TextPayload",
    "TransportError",
    "TransportErrorKind",
    "USER_AGENT",
    "UnexpectedContentTypeError",
    "delete",
    "get",
    "get_default_client",
    "head",
    "new_request",
    "options",
    "patch",
    "post",
    "put",
    "request",
    "resolve_payload",
    "set_default_client",
    "setup",
    "to_response",
    "use_client",
    "with_body",
    "with_client",
    "with_content",
    "with_headers",
    "with_json",
    "with_params",
    "with_redirects",
    "with_stream",
    "with_text",
    "with_timeout",
    "with_transport",
)

version = f"{__version__}, Python {sys.version}"


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int
    release_level: str
    serial: int


def _parse_version(v: str) -> VersionInfo:
    version_re = r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<micro>\d+)((?P<release_level>[a-z]+)(?P<serial>\d+)?)?$"
    match = re.match(version_re, v)
    if not match:
        raise ImportError(f"Invalid package version {v}")
    try:
        major = int(match.group("major"))
        minor = int(match.group("minor"))
        micro = int(match.group("micro"))
        levels = {"rc": "candidate", "a": "alpha", "b": "beta", None: "final"}
        release_level = levels[match.group("release_level")]
        serial = int(match.group("serial")) if match.group("serial") else 0
        return VersionInfo(major, minor, micro, release_level, serial)
    except Exception as e:
        raise ImportError(f"Invalid package version {v}") from e


version_info = _parse_version(__version__)
