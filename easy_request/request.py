import collections.abc
import dataclasses
from typing import Any

import httpx
import multidict
import yarl

from .base import (
    DEFAULT_TIMEOUT,
    EMPTY_PARAMS,
    MAX_REDIRECTS,
    MISSING,
    Headers,
    Method,
    QueryParameters,
    build_query_parameters,
    default_headers,
    to_headers,
    to_params,
)
from .client import Client
from .context import get_default_client
from .payload import Stream, resolve_payload
from .response import Response, to_response


@dataclasses.dataclass(frozen=True, slots=True, kw_only=True, repr=False)
class Request:
    method: str = Method.GET
    url: str | yarl.URL = ""
    headers: multidict.CIMultiDictProxy[str] = dataclasses.field(default_factory=default_headers)
    params: multidict.MultiDictProxy[str] = dataclasses.field(default_factory=lambda: EMPTY_PARAMS)
    stream: bool = False
    timeout: float = DEFAULT_TIMEOUT
    max_redirects: int = MAX_REDIRECTS
    transport: httpx.BaseTransport | None = None
    client: Client | None = None
    body: Stream | None = None
    content: bytes | bytearray | memoryview | None = None
    text: str = ""
    json: Any = MISSING
    consumed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", to_headers(self.headers))
        object.__setattr__(self, "params", to_params(self.params))
        if self.timeout < 0:
            raise ValueError("timeout cannot be negative")
        if self.max_redirects < 0:
            raise ValueError("max_redirects cannot be negative")

    def replace(self, **changes: Any) -> "Request":
        return dataclasses.replace(self, **changes)

    def update_headers(self, headers: Headers) -> "Request":
        updated_headers = multidict.CIMultiDict[str](self.headers)
        updated_headers.update(to_headers(headers))
        return self.replace(headers=multidict.CIMultiDictProxy[str](updated_headers))

    def extend_headers(self, headers: Headers) -> "Request":
        updated_headers = multidict.CIMultiDict[str](self.headers)
        updated_headers.extend(to_headers(headers))
        return self.replace(headers=multidict.CIMultiDictProxy[str](updated_headers))

    def extend_params(self, params: QueryParameters) -> "Request":
        updated_params = multidict.MultiDict[str](self.params)
        updated_params.extend(to_params(params))
        return self.replace(params=multidict.MultiDictProxy[str](updated_params))

    def consume(self) -> "Request":
        return self.replace(body=None, content=None, text="", json=MISSING, consumed=True)

    def do(self, client: Client | None = None) -> Response:
        """Send the request and return the materialized response.

        The client is picked from, in order: the ``client`` argument, the request's
        own ``client``, the default client. A request can be sent only once, the
        returned response holds a consumed copy of it.
        """
        if self.consumed:
            raise RuntimeError("Request has already been sent")

        payload = resolve_payload(self)

        configured_client = (client or self.client or get_default_client()).configure(
            transport=self.transport,
            timeout=self.timeout or DEFAULT_TIMEOUT,
            max_redirects=self.max_redirects,
        )
        raw = configured_client.send(
            self.method,
            str(self.url),
            headers=list(self.headers.items()),
            params=build_query_parameters(self.params) if self.params else None,
            content=payload.content,
        )
        return to_response(self.consume(), raw)

    def __repr__(self) -> str:
        return f"<Request [{self.method} {self.url}]>"


RequestOption = collections.abc.Callable[[Request], Request]


def new_request(method: str = Method.GET, url: str | yarl.URL = "", *options: RequestOption) -> Request:
    request = Request(method=method, url=url)
    for option in options:
        request = option(request)
    return request


def request(method: str, url: str | yarl.URL, *options: RequestOption, client: Client | None = None) -> Response:
    return new_request(method, url, *options).do(client)


def get(url: str | yarl.URL, *options: RequestOption, client: Client | None = None) -> Response:
    return request(Method.GET, url, *options, client=client)


def post(url: str | yarl.URL, *options: RequestOption, client: Client | None = None) -> Response:
    return request(Method.POST, url, *options, client=client)


def put(url: str | yarl.URL, *options: RequestOption, client: Client | None = None) -> Response:
    return request(Method.PUT, url, *options, client=client)


def patch(url: str | yarl.URL, *options: RequestOption, client: Client | None = None) -> Response:
    return request(Method.PATCH, url, *options, client=client)


def delete(url: str | yarl.URL, *options: RequestOption, client: Client | None = None) -> Response:
    return request(Method.DELETE, url, *options, client=client)


def head(url: str | yarl.URL, *options: RequestOption, client: Client | None = None) -> Response:
    return request(Method.HEAD, url, *options, client=client)


def options(url: str | yarl.URL, *options: RequestOption, client: Client | None = None) -> Response:
    return request(Method.OPTIONS, url, *options, client=client)
