"""Place notes in the vault."""

import logging

from .exceptions import WriteError
from .formatter import ELLIPSIS
from .models import NoteFile
from .utils import sanitize_filename, truncate_filename
from .vault import Vault, available_path

logger = logging.getLogger(__name__)

MAX_WRITES = 2


def note_path_for(vault: Vault, folder: str, title: str) -> str:
    """First free '<folder>/<title>.md', else '<title>-N.md'.

    A trailing ellipsis is dropped from the name once a suffix is needed.
    Overlong titles are cut to fit the filesystem's name limit.
    """
    filename = truncate_filename(f"{sanitize_filename(title)}.md")
    safe_title = filename[: -len(".md")]
    stem = safe_title[: -len(ELLIPSIS)] if safe_title.endswith(ELLIPSIS) else safe_title
    return available_path(vault, folder, filename, collision_stem=stem)


def write_note(vault: Vault, folder: str, title: str, content: str) -> NoteFile:
    """Create a new note in folder and return it."""
    vault.ensure_folder(folder)
    path = note_path_for(vault, folder, title)
    logger.debug("Creating note at %s", path)
    vault.create_file(path, content)
    return NoteFile(path=path, content=content)


def rewrite_note(vault: Vault, note: NoteFile, content: str) -> NoteFile:
    """Overwrite a note created by write_note. Allowed once."""
    if note.writes >= MAX_WRITES:
        raise WriteError(f"Note {note.path} has already been rewritten")
    vault.modify_file(note.path, content)
    note.content = content
    note.writes += 1
    return note
