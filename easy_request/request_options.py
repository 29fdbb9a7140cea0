from typing import Any

import httpx

from .base import Header, Headers, QueryParameters
from .client import Client
from .payload import Stream
from .request import Request, RequestOption


def with_json(data: Any, *, content_type: str = "application/json") -> RequestOption:
    def option(request: Request) -> Request:
        return request.update_headers({Header.CONTENT_TYPE: content_type}).replace(json=data)

    return option


def with_redirects(max_redirects: int) -> RequestOption:
    def option(request: Request) -> Request:
        return request.replace(max_redirects=max_redirects)

    return option


def with_timeout(seconds: float) -> RequestOption:
    def option(request: Request) -> Request:
        return request.replace(timeout=seconds)

    return option


def with_stream(stream: bool = True) -> RequestOption:
    def option(request: Request) -> Request:
        return request.replace(stream=stream)

    return option


def with_body(body: Stream) -> RequestOption:
    def option(request: Request) -> Request:
        return request.replace(body=body)

    return option


def with_content(content: bytes) -> RequestOption:
    def option(request: Request) -> Request:
        return request.replace(content=content)

    return option


def with_text(text: str) -> RequestOption:
    def option(request: Request) -> Request:
        return request.replace(text=text)

    return option


def with_headers(headers: Headers) -> RequestOption:
    def option(request: Request) -> Request:
        return request.update_headers(headers)

    return option


def with_params(params: QueryParameters) -> RequestOption:
    def option(request: Request) -> Request:
        return request.extend_params(params)

    return option


def with_transport(transport: httpx.BaseTransport) -> RequestOption:
    def option(request: Request) -> Request:
        return request.replace(transport=transport)

    return option


def with_client(client: Client) -> RequestOption:
    def option(request: Request) -> Request:
        return request.replace(client=client)

    return option
