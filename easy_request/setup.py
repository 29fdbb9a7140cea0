import httpx

from .base import Headers, to_headers
from .client import Client
from .context import set_default_client


def setup(
    *,
    transport: httpx.BaseTransport | None = None,
    headers: Headers | None = None,
    cookies: httpx.Cookies | dict[str, str] | None = None,
    auth: httpx.Auth | tuple[str, str] | None = None,
    trust_env: bool = True,
    install: bool = False,
) -> Client:
    client = Client(
        httpx.Client(
            transport=transport,
            headers=list(to_headers(headers).items()) if headers is not None else None,
            cookies=cookies,
            auth=auth,
            trust_env=trust_env,
        ),
    )
    if install:
        set_default_client(client)
    return client
