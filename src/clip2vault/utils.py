"""Utility functions for clip2vault."""

import random
import re
import string

_URL_RE = re.compile(r"^https?://.+")
_UNSAFE_FILENAME_RE = re.compile(r'[\\/:*?"<>|]')
_PREFIX_ALPHABET = string.ascii_lowercase + string.digits
MAX_FILENAME_BYTES = 200


def is_url(text: str) -> bool:
    """Return True if text is a single-line http(s) URL."""
    trimmed = text.strip()
    if "\n" in trimmed:
        return False
    return bool(_URL_RE.match(trimmed))


def sanitize_filename(name: str) -> str:
    """Replace characters that are invalid in filenames with '-'."""
    return _UNSAFE_FILENAME_RE.sub("-", name)


def split_extension(filename: str) -> tuple[str, str]:
    """Split 'photo.large.png' into ('photo.large', '.png')."""
    match = re.search(r"\.[^.]+$", filename)
    if not match:
        return filename, ""
    return filename[: match.start()], match.group(0)


def generate_image_prefix(length: int = 3) -> str:
    """Random lowercase alphanumeric token shared by one run's images."""
    return "".join(random.choice(_PREFIX_ALPHABET) for _ in range(length))


def estimate_tokens(text: str) -> int:
    """Rough token estimate (~4 chars per token for English)."""
    return len(text) // 4


def truncate_filename(filename: str, max_bytes: int = MAX_FILENAME_BYTES) -> str:
    """Shorten filename to max_bytes of UTF-8, keeping its extension.

    Leaves room under the usual 255-byte limit for a '-N' collision suffix.
    """
    if len(filename.encode("utf-8")) <= max_bytes:
        return filename
    stem, ext = split_extension(filename)
    budget = max_bytes - len(ext.encode("utf-8"))
    if budget <= 0:
        stem, ext, budget = filename, "", max_bytes
    return stem.encode("utf-8")[:budget].decode("utf-8", errors="ignore") + ext
