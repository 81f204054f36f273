"""Titles, body formatting and frontmatter for new notes."""

import re

from .models import Frontmatter

UNTITLED = "Untitled Note"
MAX_TITLE_LENGTH = 50
ELLIPSIS = "..."

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def generate_title(text: str) -> str:
    """Title from the first line of text, without heading markers."""
    first_line = text.strip().split("\n")[0]
    cleaned = re.sub(r"^#+\s*", "", first_line).strip()
    if len(cleaned) > MAX_TITLE_LENGTH:
        return cleaned[:MAX_TITLE_LENGTH].strip() + ELLIPSIS
    return cleaned or UNTITLED


def format_markdown(text: str, title: str) -> str:
    """Drop a leading copy of the title and demote level-1 headings."""
    content = text.strip()

    # A truncated title still matches the start of the original line.
    bare_title = title[: -len(ELLIPSIS)] if title.endswith(ELLIPSIS) else title
    title_pattern = re.compile(r"^#*\s*" + re.escape(bare_title), re.IGNORECASE)
    content = title_pattern.sub("", content, count=1).strip()

    return re.sub(r"^# ", "## ", content, flags=re.MULTILINE)


def format_frontmatter(frontmatter: Frontmatter) -> str:
    """Serialize frontmatter in the fixed key order modified, created, tags, sources."""
    tags = f"[{', '.join(frontmatter.tags)}]" if frontmatter.tags else "[]"
    lines = [
        "---",
        f"modified: {frontmatter.modified.strftime(TIMESTAMP_FORMAT)}",
        f"created: {frontmatter.created.strftime(TIMESTAMP_FORMAT)}",
        f"tags: {tags}",
    ]
    if frontmatter.source_url:
        lines.append(f'sources: "[Website]({frontmatter.source_url})"')
    lines.append("---")
    return "\n".join(lines)


def format_note(frontmatter: Frontmatter, content: str) -> str:
    """Frontmatter, a blank line, then the body."""
    return f"{format_frontmatter(frontmatter)}\n\n{content}"
