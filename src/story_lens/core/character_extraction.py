"""Recurring capitalized-name heuristics for candidate characters."""

from __future__ import annotations

import re
from collections import Counter

from story_lens.core.lexicon import CHARACTER_STOP_WORDS
from story_lens.core.story_schema import MAX_CHARACTERS, CharacterMention

# ASCII word boundaries: "Caf" in "Café" is still a token.
_CAPITALIZED_TOKEN = re.compile(r"\b[A-Z][a-z]+\b", re.ASCII)
_MIN_NAME_LENGTH = 3
_MIN_MENTIONS = 2


def _candidate_tokens(text: str) -> list[str]:
    return [
        token
        for token in _CAPITALIZED_TOKEN.findall(text)
        if len(token) >= _MIN_NAME_LENGTH and token not in CHARACTER_STOP_WORDS
    ]


def extract_characters(text: str, *, limit: int = MAX_CHARACTERS) -> list[CharacterMention]:
    """Return the most mentioned capitalized tokens, first-seen order on ties."""
    counts = Counter(_candidate_tokens(text))
    recurring = [(name, mentions) for name, mentions in counts.items() if mentions >= _MIN_MENTIONS]
    ranked = sorted(recurring, key=lambda item: item[1], reverse=True)
    return [CharacterMention(name=name, mentions=mentions) for name, mentions in ranked[:limit]]
