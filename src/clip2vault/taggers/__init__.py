"""Tagger registry."""

import logging
from typing import Optional

from ..config import Config
from ..llm import get_llm_provider
from ..llm.base import LLMProvider
from ..vault import Vault
from .ai import AITagger
from .base import MAX_TAGS, Tagger
from .keyword import KeywordTagger, score_folder

logger = logging.getLogger(__name__)

__all__ = ["AITagger", "KeywordTagger", "MAX_TAGS", "Tagger", "get_tagger", "score_folder"]


def get_tagger(config: Config, vault: Vault, llm: Optional[LLMProvider] = None) -> Tagger:
    """Pick the tagging strategy for this run.

    AI tagging needs an API key; without one the keyword strategy is used.
    """
    if not config.use_ai:
        return KeywordTagger(vault)
    if not config.api_key:
        logger.info("No API key set, falling back to keyword matching")
        return KeywordTagger(vault)
    return AITagger(vault, llm or get_llm_provider(config))
