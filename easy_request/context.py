import collections.abc
import contextlib
import contextvars
import threading

from .client import Client

_default_client: Client | None = None
_default_client_lock = threading.Lock()

client_var: contextvars.ContextVar[Client | None] = contextvars.ContextVar("easy_request_client", default=None)


def get_default_client() -> Client:
    scoped_client = client_var.get()
    if scoped_client is not None:
        return scoped_client

    global _default_client
    with _default_client_lock:
        if _default_client is None:
            _default_client = Client()
        return _default_client


def set_default_client(client: Client) -> None:
    global _default_client
    with _default_client_lock:
        _default_client = client


@contextlib.contextmanager
def use_client(client: Client) -> collections.abc.Iterator[None]:
    reset_token = client_var.set(client)
    try:
        yield
    finally:
        client_var.reset(reset_token)
