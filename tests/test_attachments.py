"""Tests for attachment folder resolution."""

import json

import pytest

from clip2vault.attachments import attachment_folder_for, note_directory, resolve_attachment_folder
from clip2vault.vault import FileSystemVault


class TestNoteDirectory:
    def test_nested(self):
        assert note_directory("Inbox/Sub/Note.md") == "Inbox/Sub"

    def test_root(self):
        assert note_directory("Note.md") == ""


class TestResolveAttachmentFolder:
    @pytest.mark.parametrize("setting", [None, "", "/"])
    def test_unset_uses_note_folder(self, setting):
        assert resolve_attachment_folder("Inbox/Note.md", setting) == "Inbox"

    def test_unset_with_note_at_root(self):
        assert resolve_attachment_folder("Note.md", None) == "."

    def test_fixed_folder_verbatim(self):
        assert resolve_attachment_folder("Inbox/Note.md", "Assets/Images") == "Assets/Images"

    def test_absolute_folder_verbatim(self):
        assert resolve_attachment_folder("Inbox/Note.md", "/Assets") == "/Assets"

    def test_relative_subfolder_under_note_folder(self):
        assert resolve_attachment_folder("Inbox/Note.md", "./attachments") == "Inbox/attachments"

    def test_relative_subfolder_with_note_at_root(self):
        assert resolve_attachment_folder("Note.md", "./attachments") == "attachments"

    def test_parent_relative_falls_through_verbatim(self):
        assert resolve_attachment_folder("Inbox/Note.md", "../shared") == "../shared"

    def test_new_file_folder_setting_is_ignored(self):
        assert resolve_attachment_folder("Inbox/Note.md", None, "Elsewhere") == "Inbox"


class TestAttachmentFolderFor:
    def test_reads_obsidian_app_config(self, tmp_path):
        (tmp_path / ".obsidian").mkdir()
        (tmp_path / ".obsidian" / "app.json").write_text(
            json.dumps({"attachmentFolderPath": "./assets"})
        )
        vault = FileSystemVault(tmp_path)
        assert attachment_folder_for(vault, "Inbox/Note.md") == "Inbox/assets"

    def test_missing_config_means_note_folder(self, vault):
        assert attachment_folder_for(vault, "Inbox/Note.md") == "Inbox"
