"""LLM-assisted tag selection with keyword fallback."""

import json
import logging
import re

from ..exceptions import LLMError
from ..llm.base import LLMProvider
from ..utils import estimate_tokens
from ..vault import Vault
from .base import MAX_TAGS, Tagger
from .keyword import KeywordTagger

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?```$", re.DOTALL)

# Reserve tokens for the instructions and the candidate list.
_PROMPT_OVERHEAD_TOKENS = 2_000


def parse_tag_array(raw: str):
    """Decode the model's reply, tolerating a fenced code block around it."""
    text = raw.strip()
    fenced = _FENCE_RE.match(text)
    if fenced:
        text = fenced.group(1).strip()
    return json.loads(text)


class AITagger(Tagger):
    def __init__(self, vault: Vault, llm: LLMProvider):
        super().__init__(vault)
        self._llm = llm
        self._fallback = KeywordTagger(vault)

    def _system_prompt(self) -> str:
        return (
            "You are a helpful assistant that suggests relevant tags for notes "
            "based on their content. You will be given note content and a list "
            "of available folder/tag names. Return only the 3 most relevant tags "
            "as a JSON array of strings. The tags must be from the provided list."
        )

    def _user_prompt(self, text: str, candidates: str) -> str:
        return (
            f"Note content:\n{self._fit_text(text, candidates)}\n\n"
            f"Available tags:\n{candidates}\n\n"
            "Return the 3 most relevant tags as a JSON array."
        )

    def _fit_text(self, text: str, candidates: str) -> str:
        available = (
            self._llm.max_input_tokens
            - _PROMPT_OVERHEAD_TOKENS
            - estimate_tokens(candidates)
        )
        if available <= 0 or estimate_tokens(text) <= available:
            return text
        return text[: available * 4]

    def suggest(self, text: str) -> list[str]:
        candidates = self.candidates()
        if not len(candidates):
            return []

        try:
            raw = self._llm.generate(
                self._system_prompt(),
                self._user_prompt(text, candidates.format_for_prompt()),
            )
            tags = parse_tag_array(raw)
        except (LLMError, ValueError) as e:
            logger.warning("AI tag suggestion failed, using keyword matching: %s", e)
            return self._fallback.suggest(text)

        if not isinstance(tags, list):
            logger.warning("AI tag suggestion returned %r, using keyword matching", tags)
            return self._fallback.suggest(text)

        logger.debug("AI suggested tags: %s", tags)
        return [str(tag) for tag in tags[:MAX_TAGS]]
