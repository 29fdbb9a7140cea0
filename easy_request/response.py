import collections.abc
import json
from typing import TYPE_CHECKING, Any

import httpx
import multidict
import yarl
from httpx._decoders import SUPPORTED_DECODERS

from .base import Header, Method, is_expected_content_type, json_re
from .errors import BodyReadError, DeserializationError, UnexpectedContentTypeError

MATERIALIZED_EXTENSION = "easy_request.materialized"

# Encodings httpx decodes, brotli and zstd only when their packages are installed
DECODED_ENCODINGS = frozenset(SUPPORTED_DECODERS) - {"identity"}

if TYPE_CHECKING:
    from .request import Request


class ResponseBody:
    """Readable handle over the body of a raw response.

    The body can be read once. Reading a closed or already consumed body
    raises ``BodyReadError``.
    """

    __slots__ = ("__response",)

    def __init__(self, response: httpx.Response) -> None:
        self.__response = response

    @property
    def closed(self) -> bool:
        return self.__response.is_closed

    def read(self) -> bytes:
        _ensure_readable(self.__response)
        try:
            return self.__response.read()
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise BodyReadError(f"Cannot read response body: {e}") from e
        finally:
            self.__response.close()

    def iter_bytes(self, chunk_size: int | None = None) -> collections.abc.Iterator[bytes]:
        _ensure_readable(self.__response)
        try:
            yield from self.__response.iter_bytes(chunk_size)
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise BodyReadError(f"Cannot read response body: {e}") from e
        finally:
            self.__response.close()

    def close(self) -> None:
        self.__response.close()

    def __enter__(self) -> "ResponseBody":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<ResponseBody [{'closed' if self.closed else 'open'}]>"


class Response:
    __slots__ = (
        "__body",
        "__content",
        "__cookies",
        "__headers",
        "__raw",
        "__request",
        "__text",
    )

    def __init__(
        self,
        *,
        raw: httpx.Response,
        request: "Request",
        content: bytes | None = None,
        text: str | None = None,
    ) -> None:
        self.__raw = raw
        self.__request = request
        self.__content = content
        self.__text = text
        self.__body = ResponseBody(raw)
        self.__headers = multidict.CIMultiDictProxy[str](multidict.CIMultiDict[str](raw.headers.multi_items()))
        self.__cookies = httpx.Cookies(raw.cookies)

    @property
    def raw(self) -> httpx.Response:
        return self.__raw

    @property
    def request(self) -> "Request":
        return self.__request

    @property
    def status_code(self) -> int:
        return self.__raw.status_code

    @property
    def status(self) -> str:
        return f"{self.__raw.status_code} {self.__raw.reason_phrase}"

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    @property
    def url(self) -> yarl.URL:
        return yarl.URL(str(self.__raw.url))

    @property
    def headers(self) -> multidict.CIMultiDictProxy[str]:
        return self.__headers

    @property
    def cookies(self) -> httpx.Cookies:
        return self.__cookies

    @property
    def uncompressed(self) -> bool:
        if self.__request.method == Method.HEAD or self.__content == b"":
            return False
        encodings = self.__raw.headers.get_list(Header.CONTENT_ENCODING, split_commas=True)
        return any(encoding.strip().lower() in DECODED_ENCODINGS for encoding in encodings)

    @property
    def content(self) -> bytes | None:
        return self.__content

    @property
    def text(self) -> str | None:
        return self.__text

    @property
    def body(self) -> ResponseBody:
        return self.__body

    def json(
        self,
        *,
        loads: collections.abc.Callable[[str | bytes], Any] = json.loads,
        content_type: str | None = None,
    ) -> Any:
        if content_type is not None:
            response_content_type = self.__headers.get(Header.CONTENT_TYPE, "").lower()
            if not is_expected_content_type(response_content_type, content_type):
                raise UnexpectedContentTypeError(f"Expected {content_type}, actual {response_content_type}")

        if not self.__content:
            raise DeserializationError("Response has no content to decode")

        try:
            return loads(self.__content)
        except ValueError as e:
            raise DeserializationError(f"Cannot decode response content: {e}") from e

    def is_informational(self) -> bool:
        return 100 <= self.status_code < 200

    def is_successful(self) -> bool:
        return 200 <= self.status_code < 300

    def is_redirection(self) -> bool:
        return 300 <= self.status_code < 400

    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600

    @property
    def content_type(self) -> str | None:
        return self.__headers.get(Header.CONTENT_TYPE)

    @property
    def is_json(self) -> bool:
        return bool(json_re.match(self.content_type or ""))

    def close(self) -> None:
        self.__body.close()

    def __enter__(self) -> "Response":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}]>"


def to_response(request: "Request", raw: httpx.Response) -> Response:
    """Build a ``Response`` from a raw response and the request that produced it.

    Unless the request asked for streaming, the whole body is read and closed
    here. A raw response can be materialized only once.
    """
    if raw.extensions.get(MATERIALIZED_EXTENSION):
        raw.close()
        raise BodyReadError("Response body has already been consumed")
    raw.extensions[MATERIALIZED_EXTENSION] = True

    if request.stream:
        _ensure_readable(raw)
        return Response(raw=raw, request=request)

    try:
        content = raw.read()
    except (httpx.HTTPError, httpx.StreamError) as e:
        raise BodyReadError(f"Cannot read response body: {e}") from e
    finally:
        raw.close()

    return Response(raw=raw, request=request, content=content, text=raw.text)


def _ensure_readable(raw: httpx.Response) -> None:
    if raw.is_stream_consumed:
        raise BodyReadError("Response body has already been consumed")
    if raw.is_closed:
        raise BodyReadError("Response body is already closed")
