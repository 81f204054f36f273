"""Vault storage abstraction and its filesystem implementation.

All vault paths are '/'-separated, case-sensitive and relative to the vault
root. Obsidian keeps its own settings (including the attachment folder
options) in ``.obsidian/app.json``, which ``FileSystemVault.get_config`` reads.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from .exceptions import FolderCreationError, WriteError
from .utils import split_extension

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    """Normalize a vault path: '/' separators, no empty or '.' segments."""
    path = path.replace("\\", "/").replace("\u00a0", " ")
    path = re.sub(r"/{2,}", "/", path)
    segments = [s for s in path.split("/") if s and s != "."]
    return "/".join(segments) or "/"


class Vault(ABC):
    """Storage capability the note pipeline writes through."""

    @abstractmethod
    def list_folders(self) -> list[str]:
        """Return every non-root folder path, in enumeration order."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if a file or folder exists at path."""

    @abstractmethod
    def create_folder(self, path: str) -> None:
        """Create a folder and any missing parents."""

    @abstractmethod
    def create_file(self, path: str, text: str) -> None:
        """Create a new text file. Fails if the path is taken."""

    @abstractmethod
    def create_binary(self, path: str, data: bytes) -> None:
        """Create a new binary file. Fails if the path is taken."""

    @abstractmethod
    def modify_file(self, path: str, text: str) -> None:
        """Overwrite an existing text file."""

    @abstractmethod
    def get_config(self, key: str) -> Any:
        """Return a host-level setting, or None if unset."""

    def ensure_folder(self, path: str) -> None:
        """Create the folder if it does not exist yet."""
        path = normalize_path(path)
        if path == "/" or self.exists(path):
            logger.debug("Folder already exists: %s", path)
            return
        logger.debug("Creating folder: %s", path)
        self.create_folder(path)


class FileSystemVault(Vault):
    """A vault backed by a directory on disk."""

    def __init__(self, root: Path):
        self.root = Path(root)
        self._config_cache: Optional[dict] = None

    def _resolve(self, path: str) -> Path:
        path = normalize_path(path)
        if path == "/":
            return self.root
        try:
            target = (self.root / path).resolve()
            root = self.root.resolve()
        except OSError as e:
            raise WriteError(f"Invalid vault path {path}: {e}") from e
        if target != root and root not in target.parents:
            raise WriteError(f"Path escapes the vault: {path}")
        return target

    def list_folders(self) -> list[str]:
        if not self.root.is_dir():
            return []
        folders = []
        for entry in sorted(self.root.rglob("*")):
            if not entry.is_dir():
                continue
            rel = entry.relative_to(self.root)
            if any(part.startswith(".") for part in rel.parts):
                continue
            folders.append(rel.as_posix())
        return folders

    def exists(self, path: str) -> bool:
        target = self._resolve(path)
        try:
            return target.exists()
        except OSError as e:
            raise WriteError(f"Cannot check {path}: {e}") from e

    def create_folder(self, path: str) -> None:
        try:
            self._resolve(path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FolderCreationError(f"Failed to create folder {path}: {e}") from e

    def create_file(self, path: str, text: str) -> None:
        self._write(path, text.encode("utf-8"))

    def create_binary(self, path: str, data: bytes) -> None:
        self._write(path, data)

    def modify_file(self, path: str, text: str) -> None:
        target = self._resolve(path)
        if not target.is_file():
            raise WriteError(f"Cannot modify missing file: {path}")
        try:
            target.write_text(text, encoding="utf-8")
        except OSError as e:
            raise WriteError(f"Failed to write {path}: {e}") from e

    def get_config(self, key: str) -> Any:
        if self._config_cache is None:
            self._config_cache = self._load_app_config()
        return self._config_cache.get(key)

    def _write(self, path: str, data: bytes) -> None:
        target = self._resolve(path)
        try:
            with open(target, "xb") as fh:
                fh.write(data)
        except FileExistsError as e:
            raise WriteError(f"File already exists: {path}") from e
        except OSError as e:
            raise WriteError(f"Failed to write {path}: {e}") from e

    def _load_app_config(self) -> dict:
        config_file = self.root / ".obsidian" / "app.json"
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable %s: %s", config_file, e)
            return {}
        return data if isinstance(data, dict) else {}


def available_path(
    vault: Vault,
    folder: str,
    filename: str,
    collision_stem: Optional[str] = None,
) -> str:
    """Return folder/filename, or the first free folder/<stem>-N<ext>.

    collision_stem replaces the filename's stem once a suffix is needed.
    """
    stem, ext = split_extension(filename)
    if collision_stem is not None:
        stem = collision_stem
    path = normalize_path(f"{folder}/{filename}")
    counter = 1
    while vault.exists(path):
        path = normalize_path(f"{folder}/{stem}-{counter}{ext}")
        counter += 1
    return path
