"""Turn clipboard text into a note in the vault.

A run walks through RunState in order:

    IDLE -> CLASSIFYING -> FETCHING_PAGE | FORMATTING_TEXT -> TAGGING_CONTENT
         -> WRITING_NOTE [-> DOWNLOADING_IMAGES -> REWRITING_NOTE]
         -> OPENING -> DONE

and ends in FAILED if any step raises. Image downloads and tag suggestion
degrade instead of failing; fetch and write errors abort the run.
"""

import logging
import threading
from enum import Enum
from typing import Callable, Optional

from .config import Config
from .converter import HtmlToMarkdownConverter
from .crawler import fetch_page
from .exceptions import EmptyClipboardError
from .formatter import format_markdown, format_note, generate_title
from .images import ImageDownloader, absolutize_image_urls, localize_images
from .models import Frontmatter, NoteFile
from .taggers import Tagger
from .transport import HttpClient
from .utils import generate_image_prefix, is_url
from .vault import Vault
from .writer import rewrite_note, write_note

logger = logging.getLogger(__name__)

# Runs share collision checks on the vault, so only one runs at a time.
_RUN_LOCK = threading.Lock()


class RunState(Enum):
    IDLE = "idle"
    CLASSIFYING = "classifying"
    FETCHING_PAGE = "fetching_page"
    FORMATTING_TEXT = "formatting_text"
    TAGGING_CONTENT = "tagging_content"
    WRITING_NOTE = "writing_note"
    DOWNLOADING_IMAGES = "downloading_images"
    REWRITING_NOTE = "rewriting_note"
    OPENING = "opening"
    DONE = "done"
    FAILED = "failed"


def _ignore(message: str) -> None:
    pass


class NoteAssembler:
    """Creates one note per create_note() call."""

    def __init__(
        self,
        config: Config,
        vault: Vault,
        http: HttpClient,
        tagger: Tagger,
        converter: Optional[HtmlToMarkdownConverter] = None,
        notify: Callable[[str], None] = _ignore,
        opener: Optional[Callable[[str], None]] = None,
    ):
        self._config = config
        self._vault = vault
        self._http = http
        self._tagger = tagger
        self._converter = converter or HtmlToMarkdownConverter()
        self._notify = notify
        self._opener = opener
        self.state = RunState.IDLE

    def create_note(self, clipboard_text: str) -> NoteFile:
        with _RUN_LOCK:
            self.state = RunState.IDLE
            try:
                note = self._run(clipboard_text)
            except Exception:
                self.state = RunState.FAILED
                raise
            self.state = RunState.DONE
            return note

    def _run(self, clipboard_text: str) -> NoteFile:
        if not clipboard_text or not clipboard_text.strip():
            raise EmptyClipboardError("Clipboard is empty")
        logger.debug("Clipboard content: %r", clipboard_text[:100])

        self.state = RunState.CLASSIFYING
        source_url = None
        if is_url(clipboard_text):
            source_url = clipboard_text.strip()
            self._notify("Fetching content from URL...")
            self.state = RunState.FETCHING_PAGE
            page = fetch_page(source_url, self._http, self._converter)
            title = page.title
            content = absolutize_image_urls(page.markdown, source_url)
            tag_text = page.markdown
            self._notify("URL content fetched successfully")
        else:
            self._notify("Processing clipboard content...")
            self.state = RunState.FORMATTING_TEXT
            title = generate_title(clipboard_text)
            content = format_markdown(clipboard_text, title)
            tag_text = clipboard_text
        logger.debug("Title: %s", title)

        self.state = RunState.TAGGING_CONTENT
        tags = self._tagger.suggest(tag_text)
        logger.debug("Suggested tags: %s", tags)
        frontmatter = Frontmatter(tags=tags, source_url=source_url)

        self.state = RunState.WRITING_NOTE
        note = write_note(
            self._vault,
            self._config.inbox_folder,
            title,
            format_note(frontmatter, content),
        )

        if source_url and self._config.download_images:
            self._notify("Downloading images...")
            self.state = RunState.DOWNLOADING_IMAGES
            prefix = generate_image_prefix()
            logger.debug("Image prefix: %s", prefix)
            downloader = ImageDownloader(self._vault, self._http)
            content = localize_images(content, note.path, prefix, downloader)

            # Same Frontmatter value, so created/modified match the first write.
            self.state = RunState.REWRITING_NOTE
            rewrite_note(self._vault, note, format_note(frontmatter, content))

        self.state = RunState.OPENING
        if self._opener is not None:
            self._opener(note.path)

        self._notify(f"Note created: {note.path}")
        return note
