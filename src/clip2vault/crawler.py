"""Fetch a single web page and convert it to Markdown."""

import logging

import requests

from .converter import HtmlToMarkdownConverter
from .exceptions import ConversionError, FetchError
from .models import PageFetchResult
from .transport import USER_AGENT, HttpClient

logger = logging.getLogger(__name__)


def fetch_page(
    url: str,
    http: HttpClient,
    converter: HtmlToMarkdownConverter,
) -> PageFetchResult:
    """Fetch url and return its title and Markdown body.

    Single attempt; any failure aborts without a partial conversion.
    """
    try:
        response = http.get(url, headers={"User-Agent": USER_AGENT})
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch {url}: {e}") from e

    if response.status != 200:
        raise FetchError(f"HTTP {response.status}: Failed to fetch {url}")

    # Raw bytes let the parser honour <meta charset> and byte order marks.
    body = response.content or response.text
    if not body or not body.strip():
        raise FetchError(f"Received empty response from {url}")

    try:
        soup = converter.parse(body)
        html = _decode(body, soup.original_encoding)
        title = converter.extract_title(soup)
        markdown = converter.html_to_markdown(soup.body or soup)
    except Exception as e:
        raise ConversionError(f"Failed to convert {url}: {e}") from e

    logger.debug("Fetched %s: title=%r, %d chars", url, title, len(markdown))
    return PageFetchResult(url=url, title=title, markdown=markdown, html=html)


def _decode(body, encoding) -> str:
    if isinstance(body, str):
        return body
    return body.decode(encoding or "utf-8", errors="replace")
