"""Abstract base class for tag suggestion strategies."""

from abc import ABC, abstractmethod

from ..vault import Vault
from ..vault_index import CandidateTagSource

MAX_TAGS = 3


class Tagger(ABC):
    """Suggests up to MAX_TAGS tags for a note, most relevant first.

    Candidate tags are the vault's leaf folder names, re-scanned on every call.
    """

    def __init__(self, vault: Vault):
        self._vault = vault

    def candidates(self) -> CandidateTagSource:
        return CandidateTagSource.scan(self._vault)

    @abstractmethod
    def suggest(self, text: str) -> list[str]:
        """Return at most MAX_TAGS tags for text."""
