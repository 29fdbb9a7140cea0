import collections.abc
import re
from typing import Any

import multidict

from .__version__ import __version__

MAX_REDIRECTS = 10
DEFAULT_TIMEOUT = 60.0
USER_AGENT = f"easy-request/{__version__}"

# Marks a field that was never assigned, so falsy values can still be set explicitly
MISSING: Any = object()


class Method:
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class Header:
    ACCEPT = multidict.istr("Accept")
    CONTENT_ENCODING = multidict.istr("Content-Encoding")
    CONTENT_TYPE = multidict.istr("Content-Type")
    LOCATION = multidict.istr("Location")
    USER_AGENT = multidict.istr("User-Agent")


_MultiDict = (
    collections.abc.Mapping[str | multidict.istr, str] | multidict.CIMultiDictProxy[str] | multidict.CIMultiDict[str]
)

json_re = re.compile(r"^application/(?:[\w.+-]+?\+)?json", re.RegexFlag.IGNORECASE)

QueryParameters = collections.abc.Mapping[str, Any] | collections.abc.Iterable[tuple[str, Any]] | _MultiDict
Headers = _MultiDict | collections.abc.Iterable[tuple[str, str]]

EMPTY_HEADERS = multidict.CIMultiDictProxy[str](multidict.CIMultiDict[str]())
EMPTY_PARAMS = multidict.MultiDictProxy[str](multidict.MultiDict[str]())


def is_expected_content_type(response_content_type: str, expected_content_type: str) -> bool:
    if expected_content_type == "application/json":
        return bool(json_re.match(response_content_type))
    return expected_content_type in response_content_type


def default_headers() -> multidict.CIMultiDictProxy[str]:
    headers = multidict.CIMultiDict[str]()
    headers.add(Header.ACCEPT, "*/*")
    headers.add(Header.USER_AGENT, USER_AGENT)
    return multidict.CIMultiDictProxy[str](headers)


def to_headers(headers: Headers | None) -> multidict.CIMultiDictProxy[str]:
    if headers is None:
        return EMPTY_HEADERS
    if isinstance(headers, multidict.CIMultiDictProxy):
        return headers
    return multidict.CIMultiDictProxy[str](multidict.CIMultiDict[str](headers))


def to_params(params: QueryParameters | None) -> multidict.MultiDictProxy[str]:
    if params is None:
        return EMPTY_PARAMS
    if isinstance(params, multidict.MultiDictProxy):
        return params
    result = multidict.MultiDict[str]()
    for name, value in build_query_parameters(params).items():
        if isinstance(value, list):
            for v in value:
                result.add(name, v)
        else:
            result.add(name, value)
    return multidict.MultiDictProxy[str](result)


def build_query_parameters(query_parameters: QueryParameters) -> dict[str, str | list[str]]:
    parameters: dict[str, str | list[str]] = {}
    for name, value in (
        query_parameters.items() if isinstance(query_parameters, collections.abc.Mapping) else query_parameters
    ):
        if value is None:
            continue
        if not isinstance(value, str) and isinstance(value, collections.abc.Iterable):
            values = [str(v) for v in value if v is not None]
            if not values:
                continue

            if name in parameters:
                existing_value = parameters[name]
                if isinstance(existing_value, str):
                    parameters[name] = [existing_value, *values]
                else:
                    parameters[name] = [*existing_value, *values]
            else:
                parameters[name] = values  # type: ignore
        else:
            if name in parameters:
                existing_value = parameters[name]
                if isinstance(existing_value, str):
                    parameters[name] = [existing_value, str(value)]
                else:
                    parameters[name] = [*existing_value, str(value)]
            else:
                parameters[name] = str(value)  # type: ignore
    return parameters
