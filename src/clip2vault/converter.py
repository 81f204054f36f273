"""HTML to Markdown conversion."""

from abc import ABC, abstractmethod
from typing import Union

from bs4 import BeautifulSoup, Tag
from markdownify import ATX, MarkdownConverter

DEFAULT_TITLE = "Web Clipping"

# Elements that carry no readable content.
_STRIP_TAGS = ["script", "style", "noscript", "template"]


class _GfmConverter(MarkdownConverter):
    """markdownify converter with GFM task-list checkboxes."""

    def convert_input(self, el, text, *args, **kwargs):
        if el.get("type") == "checkbox":
            return "[x] " if el.has_attr("checked") else "[ ] "
        return text


class MarkdownEngine(ABC):
    """Pluggable HTML to Markdown engine."""

    @abstractmethod
    def html_to_markdown(self, html: Union[str, Tag]) -> str:
        """Convert an HTML string or parsed element to Markdown."""


class HtmlToMarkdownConverter(MarkdownEngine):
    """Converts page bodies using ATX headings, '-' bullets, fenced code,
    '*' emphasis and GFM tables / strikethrough / task lists."""

    def __init__(self, **overrides):
        self._options = {
            "heading_style": ATX,
            "bullets": "-",
            "strong_em_symbol": "*",
            "code_language": "",
        }
        self._options.update(overrides)

    def parse(self, html: Union[str, bytes]) -> BeautifulSoup:
        """Parse markup; byte input has its encoding detected by bs4."""
        soup = BeautifulSoup(html, "html.parser")
        for tag in soup.find_all(_STRIP_TAGS):
            tag.decompose()
        return soup

    def html_to_markdown(self, html: Union[str, Tag]) -> str:
        if isinstance(html, str):
            soup = self.parse(html)
            html = soup.body or soup
        markdown = _GfmConverter(**self._options).convert_soup(html)
        return markdown.strip()

    @staticmethod
    def extract_title(soup: BeautifulSoup) -> str:
        """<title> text, else the first <h1>, else a fixed fallback."""
        title = ""
        for selector in ("title", "h1"):
            tag = soup.find(selector)
            if tag is not None and tag.get_text():
                title = tag.get_text()
                break
        return title.strip() or DEFAULT_TITLE
