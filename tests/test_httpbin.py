from typing import Any

import pytest

import easy_request


def test_get(httpbin: Any) -> None:
    url = f"{httpbin.url}/get"

    response = easy_request.get(url)

    assert response.ok
    assert response.json()["url"] == url


def test_default_headers(httpbin: Any) -> None:
    response = easy_request.get(f"{httpbin.url}/headers")

    headers = response.json()["headers"]
    assert headers["Accept"] == "*/*"
    assert headers["User-Agent"] == easy_request.USER_AGENT


def test_post_json(httpbin: Any) -> None:
    response = easy_request.post(f"{httpbin.url}/post", easy_request.with_json({"a": [1, 2]}))

    assert response.ok
    response_json = response.json(content_type="application/json")
    assert response_json["json"] == {"a": [1, 2]}
    assert response_json["headers"]["Content-Type"] == "application/json"


def test_method(httpbin: Any) -> None:
    response = easy_request.request("PUT", f"{httpbin.url}/anything", easy_request.with_text("text"))

    assert response.json()["method"] == "PUT"
    assert response.json()["data"] == "text"


def test_query_parameters(httpbin: Any) -> None:
    response = easy_request.get(f"{httpbin.url}/anything", easy_request.with_params({"a": ["b", "c"]}))

    assert response.json()["args"] == {"a": ["b", "c"]}


def test_redirects_max_redirects(httpbin: Any) -> None:
    response = easy_request.get(f"{httpbin.url}/absolute-redirect/10", easy_request.with_redirects(2))

    assert response.status_code == 302
    assert str(response.url) == f"{httpbin.url}/absolute-redirect/8"
    assert response.headers["Location"] == f"{httpbin.url}/absolute-redirect/7"


def test_redirects_allowed_default(httpbin: Any) -> None:
    response = easy_request.get(f"{httpbin.url}/absolute-redirect/5")

    assert response.status_code == 200
    assert response.json()["url"] == f"{httpbin.url}/get"


def test_stream(httpbin: Any) -> None:
    with easy_request.get(f"{httpbin.url}/stream-bytes/128", easy_request.with_stream()) as response:
        assert response.content is None
        assert len(response.body.read()) == 128


def test_status(httpbin: Any) -> None:
    response = easy_request.get(f"{httpbin.url}/status/418")

    assert not response.ok
    assert response.status_code == 418


def test_to_response_fails(httpbin: Any) -> None:
    response = easy_request.get(f"{httpbin.url}/get")

    with pytest.raises(easy_request.BodyReadError):
        easy_request.to_response(response.request, response.raw)
