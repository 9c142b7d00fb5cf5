"""Structural text counts, reading time, and complexity tiers."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Literal

ComplexityTier = Literal["low", "medium", "high"]

WORDS_PER_MINUTE = 200
_SENTENCE_TERMINATORS = re.compile(r"[.!?]+")


@dataclass(frozen=True)
class TextMetrics:
    """Counts derived from raw story text."""

    word_count: int
    sentence_count: int
    paragraph_count: int
    reading_time: int
    complexity: ComplexityTier


def count_words(text: str) -> int:
    # Naive single-space split; runs of spaces produce empty tokens that still count.
    return len(text.split(" "))


def count_sentences(text: str) -> int:
    return len(_SENTENCE_TERMINATORS.split(text))


def count_paragraphs(text: str) -> int:
    return len(text.split("\n\n"))


def reading_time_minutes(word_count: int) -> int:
    """Return whole reading minutes at a fixed reading pace."""
    return math.ceil(word_count / WORDS_PER_MINUTE)


def complexity_tier(word_count: int) -> ComplexityTier:
    """Bucket a word count into a coarse complexity tier."""
    if word_count > 1000:
        return "high"
    if word_count > 500:
        return "medium"
    return "low"


def extract_text_metrics(text: str) -> TextMetrics:
    """Compute all structural metrics for one story text."""
    word_count = count_words(text)
    return TextMetrics(
        word_count=word_count,
        sentence_count=count_sentences(text),
        paragraph_count=count_paragraphs(text),
        reading_time=reading_time_minutes(word_count),
        complexity=complexity_tier(word_count),
    )
