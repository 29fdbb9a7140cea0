from collections.abc import Callable

import httpx

import easy_request
from tests.conftest import Handler, RecordingTransport


def test_use_client() -> None:
    default_client = easy_request.get_default_client()
    client = easy_request.Client()

    with easy_request.use_client(client):
        assert easy_request.get_default_client() is client

    assert easy_request.get_default_client() is default_client


def test_set_default_client() -> None:
    default_client = easy_request.get_default_client()
    client = easy_request.Client()

    easy_request.set_default_client(client)
    try:
        assert easy_request.get_default_client() is client
    finally:
        easy_request.set_default_client(default_client)


def test_scoped_client_is_used(echo_transport: RecordingTransport) -> None:
    client = easy_request.setup(transport=echo_transport)

    with easy_request.use_client(client):
        response = easy_request.get("http://example.com/get")

    assert response.ok
    assert len(echo_transport.requests) == 1


def test_client_precedence(
    transport_factory: Callable[[Handler], RecordingTransport],
    response_factory: Callable[..., httpx.Response],
) -> None:
    transports = {
        name: transport_factory(lambda request: response_factory())
        for name in ("argument", "request", "scoped")
    }
    clients = {name: easy_request.setup(transport=transport) for name, transport in transports.items()}

    with easy_request.use_client(clients["scoped"]):
        easy_request.get("http://example.com", easy_request.with_client(clients["request"]), client=clients["argument"])
        easy_request.get("http://example.com", easy_request.with_client(clients["request"]))
        easy_request.get("http://example.com")

    assert {name: len(transport.requests) for name, transport in transports.items()} == {
        "argument": 1,
        "request": 1,
        "scoped": 1,
    }
