"""Vault folder index used as the tag vocabulary.

Every non-root folder in the vault contributes its leaf name (the last path
segment) as a candidate tag. Both tagging strategies read from the same
CandidateTagSource so they agree on what a valid tag is.
"""

from .vault import Vault


class CandidateTagSource:
    """Ordered leaf folder names of a vault."""

    def __init__(self, names: list[str] | None = None):
        self.names: list[str] = names or []

    @classmethod
    def scan(cls, vault: Vault) -> "CandidateTagSource":
        """Collect leaf names in the vault's folder enumeration order.

        Duplicate leaf names (e.g. ``Work/Notes`` and ``Home/Notes``) are kept,
        one entry per folder.
        """
        names = []
        for path in vault.list_folders():
            if path in ("", "/"):
                continue
            names.append(path.split("/")[-1])
        return cls(names)

    def format_for_prompt(self) -> str:
        """Comma-separated list for LLM prompt injection."""
        return ", ".join(self.names)

    def __iter__(self):
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)
