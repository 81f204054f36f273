"""Image reference rewriting and downloading for web clips.

Only inline ``![alt](url)`` references are recognised. Replacements are
collected during the scan and applied afterwards, each one substituting the
first remaining occurrence of the exact matched span.

Local paths containing spaces are written as ``![alt](<path>)`` so the link
stays valid CommonMark. Other paths are written bare.
"""

import logging
import re
from typing import Iterator
from urllib.parse import urljoin, urlparse

import requests

from .attachments import attachment_folder_for
from .exceptions import Clip2VaultError, DownloadError
from .models import ImageReference
from .transport import HttpClient
from .utils import sanitize_filename, truncate_filename
from .vault import Vault, available_path

logger = logging.getLogger(__name__)

IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")

_ABSOLUTE_PREFIXES = ("http://", "https://")
_SPECIAL_PREFIXES = ("data:", "blob:")


def find_images(markdown: str) -> Iterator[ImageReference]:
    """Yield every inline image reference in order of appearance."""
    for match in IMAGE_RE.finditer(markdown):
        yield ImageReference(alt_text=match.group(1), url=match.group(2), span=match.group(0))


def _apply(markdown: str, replacements: list[tuple[str, str]]) -> str:
    for original, replacement in replacements:
        markdown = markdown.replace(original, replacement, 1)
    return markdown


def _image_markdown(alt: str, target: str) -> str:
    if " " in target:
        target = f"<{target}>"
    return f"![{alt}]({target})"


def absolutize_image_urls(markdown: str, base_url: str) -> str:
    """Rewrite relative image URLs to absolute ones.

    The base URL is treated as a directory: ``https://site.com/page`` plus
    ``img.png`` gives ``https://site.com/page/img.png``.
    """
    base = base_url if base_url.endswith("/") else base_url + "/"
    replacements = []

    for image in find_images(markdown):
        if image.url.startswith(_ABSOLUTE_PREFIXES + _SPECIAL_PREFIXES):
            continue
        try:
            absolute = urljoin(base, image.url)
        except ValueError as e:
            logger.warning("Leaving malformed image URL %r unchanged: %s", image.url, e)
            continue
        logger.debug("Resolved image URL %s -> %s", image.url, absolute)
        replacements.append((image.span, f"![{image.alt_text}]({absolute})"))

    logger.debug("Converted %d relative image URLs to absolute", len(replacements))
    return _apply(markdown, replacements)


def image_filename(url: str, prefix: str) -> str:
    """Local filename for an image URL: '<prefix>_<last path segment>'."""
    filename = urlparse(url).path.split("/")[-1] or "image.jpg"
    if "." not in filename:
        filename += ".jpg"
    return f"{prefix}_{filename}"


class ImageDownloader:
    """Downloads images into the attachment folder resolved for a note."""

    def __init__(self, vault: Vault, http: HttpClient):
        self._vault = vault
        self._http = http

    def download(self, url: str, filename: str, note_path: str) -> str:
        """Save the image and return its vault path.

        On any failure the original URL is returned instead.
        """
        try:
            return self._download(url, filename, note_path)
        except (Clip2VaultError, OSError) as e:
            logger.warning("Keeping remote image %s: %s", url, e)
            return url

    def _download(self, url: str, filename: str, note_path: str) -> str:
        try:
            response = self._http.get(url)
        except requests.RequestException as e:
            raise DownloadError(f"Failed to download {url}: {e}") from e
        if response.status != 200:
            raise DownloadError(f"HTTP {response.status}: Failed to download {url}")

        folder = attachment_folder_for(self._vault, note_path)
        if folder not in (".", "/"):
            self._vault.ensure_folder(folder)

        path = available_path(
            self._vault, folder, truncate_filename(sanitize_filename(filename))
        )
        self._vault.create_binary(path, response.content)
        logger.debug("Saved image %s -> %s", url, path)
        return path


def localize_images(
    markdown: str,
    note_path: str,
    prefix: str,
    downloader: ImageDownloader,
) -> str:
    """Download every absolute http(s) image and point references at the local copies.

    Images are fetched one at a time in order of appearance.
    """
    replacements = []
    for image in find_images(markdown):
        if not image.url.startswith(_ABSOLUTE_PREFIXES):
            logger.debug("Skipping non-http image: %s", image.url)
            continue
        try:
            filename = image_filename(image.url, prefix)
        except ValueError as e:
            logger.warning("Skipping malformed image URL %r: %s", image.url, e)
            continue
        local_path = downloader.download(image.url, filename, note_path)
        if local_path == image.url:
            continue
        replacements.append((image.span, _image_markdown(image.alt_text, local_path)))

    logger.debug("Localized %d images", len(replacements))
    return _apply(markdown, replacements)
