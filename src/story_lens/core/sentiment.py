"""Lexicon-based sentiment scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from story_lens.core.lexicon import SENTIMENT_LEXICON, count_keyword_occurrences

SentimentLabel = Literal["positive", "neutral", "negative"]

POSITIVE_THRESHOLD = 2
NEGATIVE_THRESHOLD = -2


@dataclass(frozen=True)
class SentimentReading:
    """Sentiment bucket plus the raw lexicon hit counts behind it."""

    label: SentimentLabel
    score: int
    positive_hits: int
    negative_hits: int


def sentiment_label(score: int) -> SentimentLabel:
    """Map a signed lexicon score to its sentiment bucket."""
    if score > POSITIVE_THRESHOLD:
        return "positive"
    if score < NEGATIVE_THRESHOLD:
        return "negative"
    return "neutral"


def classify_sentiment(text: str) -> SentimentReading:
    """Score text by counting positive and negative lexicon substrings."""
    lowered = text.lower()
    positive_hits = count_keyword_occurrences(lowered, SENTIMENT_LEXICON["positive"])
    negative_hits = count_keyword_occurrences(lowered, SENTIMENT_LEXICON["negative"])
    score = positive_hits - negative_hits
    return SentimentReading(
        label=sentiment_label(score),
        score=score,
        positive_hits=positive_hits,
        negative_hits=negative_hits,
    )
