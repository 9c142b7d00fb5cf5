"""Fixed keyword lexicons for sentiment, theme, and character heuristics."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Final, Literal

SentimentPolarity = Literal["positive", "negative"]

POSITIVE_WORDS: Final[tuple[str, ...]] = (
    "happy",
    "joy",
    "love",
    "wonderful",
    "amazing",
    "great",
    "beautiful",
    "fantastic",
)
NEGATIVE_WORDS: Final[tuple[str, ...]] = (
    "sad",
    "angry",
    "hate",
    "terrible",
    "awful",
    "bad",
    "horrible",
    "disgusting",
)
SENTIMENT_LEXICON: Final[Mapping[SentimentPolarity, tuple[str, ...]]] = MappingProxyType(
    {
        "positive": POSITIVE_WORDS,
        "negative": NEGATIVE_WORDS,
    }
)

# Ordered: ties in theme strength keep this order.
THEME_KEYWORDS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "Love & Romance": ("love", "heart", "romance", "kiss", "marriage", "relationship"),
        "Adventure": ("journey", "quest", "adventure", "travel", "explore", "discover"),
        "Conflict": ("war", "battle", "fight", "conflict", "struggle", "enemy"),
        "Family": ("family", "mother", "father", "parent", "child", "sibling"),
        "Nature": ("tree", "forest", "mountain", "ocean", "sky", "nature"),
        "Mystery": ("mystery", "secret", "hidden", "unknown", "investigate", "clue"),
    }
)

CHARACTER_STOP_WORDS: Final[frozenset[str]] = frozenset(
    {"The", "And", "But", "For", "His", "Her", "She", "Him"}
)


def count_keyword_occurrences(text: str, keywords: Iterable[str]) -> int:
    """Sum literal substring hits for each keyword, including hits inside longer words."""
    return sum(text.count(keyword) for keyword in keywords)
