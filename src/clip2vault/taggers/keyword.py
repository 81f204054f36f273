"""Keyword scoring over vault folder names."""

import re

from .base import MAX_TAGS, Tagger

_WORD_SPLIT_RE = re.compile(r"[\s\-_]+")


def score_folder(folder_name: str, text: str) -> int:
    """Score a folder name against text.

    +10 if the whole (lower-cased) name occurs in the text, plus 3 for each
    word of the name longer than two characters that occurs in the text.
    """
    name = folder_name.lower()
    text = text.lower()
    score = 0
    if name in text:
        score += 10
    for word in _WORD_SPLIT_RE.split(name):
        if len(word) > 2 and word in text:
            score += 3
    return score


class KeywordTagger(Tagger):
    def suggest(self, text: str) -> list[str]:
        scored = []
        for name in self.candidates():
            score = score_folder(name, text)
            if score > 0:
                scored.append((name, score))
        # sorted() is stable, so equal scores keep folder order
        scored = sorted(scored, key=lambda item: item[1], reverse=True)
        return [name for name, _ in scored[:MAX_TAGS]]
