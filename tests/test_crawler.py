"""Tests for page fetching."""

import pytest
import requests

from clip2vault.converter import HtmlToMarkdownConverter
from clip2vault.crawler import fetch_page
from clip2vault.exceptions import ConversionError, FetchError

URL = "https://site.com/article"


class TestFetchPage:
    def test_success(self, http):
        http.add(URL, text="<html><head><title>Article</title></head><body><p>Hello</p></body></html>")
        page = fetch_page(URL, http, HtmlToMarkdownConverter())
        assert page.title == "Article"
        assert page.markdown == "Hello"
        assert page.url == URL
        assert "<p>Hello</p>" in page.html

    def test_non_200_status(self, http):
        http.add(URL, status=404, text="Not found")
        with pytest.raises(FetchError, match="404"):
            fetch_page(URL, http, HtmlToMarkdownConverter())

    def test_empty_body(self, http):
        http.add(URL, text="   \n")
        with pytest.raises(FetchError, match="empty"):
            fetch_page(URL, http, HtmlToMarkdownConverter())

    def test_transport_error(self, http):
        http.responses[URL] = requests.Timeout("timed out")
        with pytest.raises(FetchError, match="timed out"):
            fetch_page(URL, http, HtmlToMarkdownConverter())

    def test_conversion_error_is_a_fetch_error(self, http):
        http.add(URL, text="<p>x</p>")
        converter = HtmlToMarkdownConverter()
        converter.html_to_markdown = lambda html: 1 / 0
        with pytest.raises(ConversionError) as excinfo:
            fetch_page(URL, http, converter)
        assert isinstance(excinfo.value, FetchError)


class TestFetchPageEncoding:
    UTF8_PAGE = (
        '<html><head><title>Café – naïve</title></head>'
        "<body><p>Grüße</p></body></html>"
    ).encode("utf-8")

    def test_utf8_bytes_without_charset_header(self, http):
        # The transport's text guessed ISO-8859-1, as requests does for bare text/html.
        http.add(URL, text=self.UTF8_PAGE.decode("iso-8859-1"), content=self.UTF8_PAGE)
        page = fetch_page(URL, http, HtmlToMarkdownConverter())
        assert page.title == "Café – naïve"
        assert page.markdown == "Grüße"
        assert "Grüße" in page.html

    def test_meta_charset_is_honoured(self, http):
        body = (
            '<html><head><meta charset="iso-8859-1"><title>Caf\xe9</title></head>'
            "<body><p>na\xefve</p></body></html>"
        ).encode("iso-8859-1")
        http.add(URL, content=body)
        page = fetch_page(URL, http, HtmlToMarkdownConverter())
        assert page.title == "Café"
        assert page.markdown == "naïve"

    def test_text_only_response(self, http):
        http.add(URL, text="<title>Plain</title><p>Body</p>", content=b"")
        page = fetch_page(URL, http, HtmlToMarkdownConverter())
        assert page.title == "Plain"
