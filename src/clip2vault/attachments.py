"""Resolve where downloaded assets for a note should be stored.

Mirrors Obsidian's "Default location for new attachments" options:

- unset or "/": same folder as the note
- a plain folder ("assets", "/assets"): that folder, vault-rooted
- "./sub": a subfolder under the note's folder
"""

from typing import Optional

from .vault import Vault


def note_directory(note_path: str) -> str:
    """Folder containing note_path, or '' when the note is at the root."""
    index = note_path.rfind("/")
    return note_path[:index] if index > 0 else ""


def resolve_attachment_folder(
    note_path: str,
    attachment_folder_path: Optional[str],
    new_file_folder_path: Optional[str] = None,
) -> str:
    """Map a note path and the host attachment setting to a target folder.

    new_file_folder_path is accepted for parity with the host settings but
    does not influence the result.
    """
    if not attachment_folder_path or attachment_folder_path == "/":
        return note_directory(note_path) or "."

    if attachment_folder_path.startswith("/") or "./" not in attachment_folder_path:
        return attachment_folder_path

    if attachment_folder_path.startswith("./"):
        note_dir = note_directory(note_path)
        relative = attachment_folder_path[2:]
        return f"{note_dir}/{relative}" if note_dir else relative

    return attachment_folder_path


def attachment_folder_for(vault: Vault, note_path: str) -> str:
    """Resolve the attachment folder using the vault's own settings."""
    return resolve_attachment_folder(
        note_path,
        vault.get_config("attachmentFolderPath"),
        vault.get_config("newFileFolderPath"),
    )
