import json
import logging
from collections.abc import Callable

import httpx
import pytest

logging.basicConfig(level="DEBUG")

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def make_response(
    status_code: int = 200,
    *,
    content: bytes = b"",
    headers: dict[str, str] | None = None,
    url: str = "http://example.com/",
) -> httpx.Response:
    # stream= keeps the body unread, as a response coming from the network
    return httpx.Response(
        status_code,
        headers=headers,
        stream=httpx.ByteStream(content),
        request=httpx.Request("GET", url),
    )


def echo(request: httpx.Request) -> httpx.Response:
    body = {
        "method": request.method,
        "url": str(request.url),
        "headers": dict(request.headers),
        "body": request.content.decode("latin-1"),
    }
    return make_response(
        content=json.dumps(body).encode("utf-8"),
        headers={"Content-Type": "application/json"},
        url=str(request.url),
    )


def redirect(request: httpx.Request) -> httpx.Response:
    hops_left = int(request.url.path.rsplit("/", 1)[-1])
    if hops_left == 0:
        return echo(request)
    return make_response(302, headers={"Location": f"/redirect/{hops_left - 1}"}, url=str(request.url))


@pytest.fixture
def echo_transport() -> RecordingTransport:
    return RecordingTransport(echo)


@pytest.fixture
def redirect_transport() -> RecordingTransport:
    return RecordingTransport(redirect)


@pytest.fixture
def transport_factory() -> Callable[[Handler], RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def response_factory() -> Callable[..., httpx.Response]:
    return make_response
