"""Collection-level statistics over analyzed stories."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from story_lens.core.sentiment import SentimentLabel
from story_lens.core.story_schema import Story

SENTIMENT_BUCKETS: tuple[SentimentLabel, ...] = ("positive", "neutral", "negative")


@dataclass(frozen=True)
class StoryCollectionSummary:
    """Aggregate summary consumed by dashboard views."""

    total_stories: int = 0
    total_words: int = 0
    average_sentiment_score: float = 0.0
    average_character_count: float = 0.0
    sentiment_distribution: dict[SentimentLabel, int] = field(
        default_factory=lambda: dict.fromkeys(SENTIMENT_BUCKETS, 0)
    )
    genre_distribution: dict[str, int] = field(default_factory=dict)

    @property
    def has_data(self) -> bool:
        return self.total_stories > 0


def summarize_stories(stories: Sequence[Story]) -> StoryCollectionSummary:
    """Summarize analyzed stories; unanalyzed records are ignored."""
    count = 0
    total_words = 0
    total_sentiment = 0
    total_characters = 0
    sentiment_distribution: dict[SentimentLabel, int] = dict.fromkeys(SENTIMENT_BUCKETS, 0)
    genre_counts: Counter[str] = Counter()
    for story in stories:
        analysis = story.analysis
        if analysis is None:
            continue
        count += 1
        total_words += analysis.word_count
        total_sentiment += analysis.sentiment_score
        total_characters += len(analysis.characters)
        sentiment_distribution[analysis.sentiment] += 1
        genre_counts[story.genre_label] += 1

    if count == 0:
        return StoryCollectionSummary()
    return StoryCollectionSummary(
        total_stories=count,
        total_words=total_words,
        average_sentiment_score=total_sentiment / count,
        average_character_count=total_characters / count,
        sentiment_distribution=sentiment_distribution,
        genre_distribution=dict(genre_counts),
    )
