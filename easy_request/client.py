import http.cookiejar
import logging
from typing import Any

import httpx

from .base import DEFAULT_TIMEOUT, MAX_REDIRECTS
from .errors import TransportError, TransportErrorKind

logger = logging.getLogger(__package__)


class _IgnoreResponseCookiesPolicy(http.cookiejar.DefaultCookiePolicy):
    """Keeps cookies configured on the client and ignores ``Set-Cookie`` of responses."""

    def set_ok(self, cookie: http.cookiejar.Cookie, request: Any) -> bool:
        return False


_ignore_response_cookies_policy = _IgnoreResponseCookiesPolicy()


class Client:
    """Sends requests through a shared ``httpx.Client``.

    A ``Client`` is never reconfigured in place: ``configure`` returns a copy
    carrying the per-call timeout, redirect limit and transport. Copies without
    a transport override share the underlying ``httpx.Client`` and its
    connection pool.

    Cookies set by responses are never stored in the ``httpx.Client`` jar, so one
    call cannot leak them into the next. Cookies configured on the client are
    still sent.
    """

    __slots__ = ("__http_client", "__max_redirects", "__timeout")

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_redirects: int = MAX_REDIRECTS,
    ) -> None:
        if timeout < 0:
            raise ValueError("timeout cannot be negative")
        if max_redirects < 0:
            raise ValueError("max_redirects cannot be negative")

        self.__http_client = http_client if http_client is not None else httpx.Client()
        self.__http_client.cookies.jar.set_policy(_ignore_response_cookies_policy)
        self.__timeout = timeout
        self.__max_redirects = max_redirects

    @property
    def http_client(self) -> httpx.Client:
        return self.__http_client

    @property
    def timeout(self) -> float:
        return self.__timeout

    @property
    def max_redirects(self) -> int:
        return self.__max_redirects

    def configure(
        self,
        *,
        transport: httpx.BaseTransport | None = None,
        timeout: float | None = None,
        max_redirects: int | None = None,
    ) -> "Client":
        http_client = self.__http_client if transport is None else _with_transport(self.__http_client, transport)
        return Client(
            http_client,
            timeout=self.__timeout if timeout is None else timeout,
            max_redirects=self.__max_redirects if max_redirects is None else max_redirects,
        )

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: list[tuple[str, str]] | None = None,
        params: dict[str, str | list[str]] | None = None,
        content: Any = None,
    ) -> httpx.Response:
        """Send a request, following at most ``max_redirects`` redirects.

        The response is returned with its body unread. When the limit is reached
        the last redirect response is returned as is.
        """
        try:
            client_request = self.__http_client.build_request(
                method=method,
                url=url,
                params=params,
                headers=headers,
                content=content,
                timeout=self.__timeout,
            )
            logger.debug(
                "Sending request %s %s with timeout %s",
                method,
                url,
                self.__timeout,
                extra={
                    "request_method": method,
                    "request_url": url,
                    "request_timeout": self.__timeout,
                },
            )
            client_response = self.__http_client.send(client_request, stream=True, follow_redirects=False)

            history: list[httpx.Response] = []
            while client_response.next_request is not None:
                if len(history) >= self.__max_redirects:
                    logger.debug(
                        "Request %s %s has reached the limit of %s redirects",
                        method,
                        url,
                        self.__max_redirects,
                        extra={
                            "request_method": method,
                            "request_url": url,
                        },
                    )
                    break

                next_request = client_response.next_request
                client_response.close()
                history.append(client_response)

                logger.debug(
                    "Following redirect %s %s to %s",
                    method,
                    url,
                    next_request.url,
                    extra={
                        "request_method": method,
                        "request_url": url,
                    },
                )
                client_response = self.__http_client.send(next_request, stream=True, follow_redirects=False)
                client_response.history = list(history)

            return client_response
        except (httpx.TransportError, httpx.InvalidURL) as e:
            raise TransportError(
                f"Request {method} {url} has failed: {e}",
                kind=_get_error_kind(e),
                method=method,
                url=url,
                cause=e,
            ) from e

    def __repr__(self) -> str:
        return f"<Client [timeout={self.__timeout} max_redirects={self.__max_redirects}]>"


def _with_transport(http_client: httpx.Client, transport: httpx.BaseTransport) -> httpx.Client:
    # The transport belongs to the caller, so this client is never closed here
    return httpx.Client(
        transport=transport,
        auth=http_client.auth,
        headers=http_client.headers,
        cookies=http_client.cookies,
        base_url=http_client.base_url,
        event_hooks=http_client.event_hooks,
        trust_env=http_client.trust_env,
    )


def _get_error_kind(e: Exception) -> TransportErrorKind:
    if isinstance(e, httpx.TimeoutException):
        return TransportErrorKind.TIMEOUT
    if isinstance(e, httpx.ConnectError):
        return TransportErrorKind.CONNECT
    if isinstance(e, httpx.NetworkError):
        return TransportErrorKind.NETWORK
    if isinstance(e, (httpx.InvalidURL, httpx.UnsupportedProtocol, httpx.LocalProtocolError)):
        return TransportErrorKind.INVALID_REQUEST
    if isinstance(e, httpx.ProtocolError):
        return TransportErrorKind.PROTOCOL
    return TransportErrorKind.OTHER
