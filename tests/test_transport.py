"""Tests for the requests-backed transport."""

from unittest.mock import MagicMock

import requests

from clip2vault.transport import USER_AGENT, RequestsHttpClient

PAGE = (
    "<html><head><title>Café – naïve</title></head>"
    "<body><p>Grüße aus München, schöne Straße.</p></body></html>"
).encode("utf-8")


def _response(content: bytes, content_type: str) -> requests.Response:
    response = requests.Response()
    response.status_code = 200
    response._content = content
    response.headers["Content-Type"] = content_type
    response.encoding = requests.utils.get_encoding_from_headers(response.headers)
    return response


def _client(response) -> RequestsHttpClient:
    session = MagicMock()
    session.headers = {}
    session.get.return_value = response
    return RequestsHttpClient(session=session)


class TestRequestsHttpClient:
    def test_sets_user_agent(self):
        client = _client(_response(b"", "text/html"))
        assert client._session.headers["User-Agent"] == USER_AGENT

    def test_missing_charset_is_detected(self):
        client = _client(_response(PAGE, "text/html"))
        response = client.get("https://site.com/")
        assert "Café – naïve" in response.text
        assert response.content == PAGE

    def test_declared_charset_is_kept(self):
        body = "<p>na\xefve</p>".encode("iso-8859-1")
        client = _client(_response(body, "text/html; charset=ISO-8859-1"))
        response = client.get("https://site.com/")
        assert response.text == "<p>naïve</p>"

    def test_returns_error_status(self):
        raw = _response(b"gone", "text/plain; charset=utf-8")
        raw.status_code = 404
        response = _client(raw).get("https://site.com/")
        assert response.status == 404
