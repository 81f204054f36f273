"""Data models for clip2vault."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class PageFetchResult:
    """A fetched web page converted to Markdown."""

    url: str
    title: str
    markdown: str
    html: str


@dataclass(frozen=True)
class ImageReference:
    """A single inline image occurrence found in Markdown."""

    alt_text: str
    url: str
    span: str  # the exact ![alt](url) text that was matched


@dataclass
class Frontmatter:
    """Metadata block written at the top of every note."""

    created: datetime = field(default_factory=datetime.now)
    modified: Optional[datetime] = None
    tags: list[str] = field(default_factory=list)
    source_url: Optional[str] = None

    def __post_init__(self):
        if self.modified is None:
            self.modified = self.created
        self.tags = list(self.tags)[:3]


@dataclass
class NoteFile:
    """A note persisted in the vault."""

    path: str
    content: str
    writes: int = 1
