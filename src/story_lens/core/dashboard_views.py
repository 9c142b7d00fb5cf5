"""Dashboard read model projections from stored stories and aggregate summaries."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from story_lens.core.aggregation import (
    SENTIMENT_BUCKETS,
    StoryCollectionSummary,
    summarize_stories,
)
from story_lens.core.story_schema import Story

DEFAULT_RECENT_LIMIT = 5


@dataclass(frozen=True)
class DashboardOverviewCard:
    """Headline numbers formatted for the stats panel."""

    total_stories: int
    total_words_display: str
    average_sentiment_display: str
    average_characters_display: int


@dataclass(frozen=True)
class RecentStoryItem:
    """One row of the recent stories list."""

    story_id: str
    title: str
    author: str
    word_count: int
    uploaded_on: str


@dataclass(frozen=True)
class StoryDetailView:
    """Details panel for one selected story."""

    story_id: str
    title: str
    byline: str
    word_count: int
    sentence_count: int
    reading_time: int
    sentiment: str
    complexity: str
    character_tags: list[str]
    theme_tags: list[str]


@dataclass(frozen=True)
class ChartSeries:
    """Labels and values for one chart."""

    title: str
    labels: list[str]
    values: list[int]


@dataclass(frozen=True)
class DashboardReadModel:
    """Composed dashboard projection returned to the presentation layer."""

    has_data: bool
    overview: DashboardOverviewCard
    recent_stories: list[RecentStoryItem]
    sentiment_chart: ChartSeries
    genre_chart: ChartSeries


def format_upload_date(value: str) -> str:
    """Format an ISO timestamp as a short date like ``Oct 18, 2026``."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return value
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _one_decimal(value: float) -> str:
    """Format with one decimal place, rounding ties away from zero."""
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def build_dashboard_overview(summary: StoryCollectionSummary) -> DashboardOverviewCard:
    return DashboardOverviewCard(
        total_stories=summary.total_stories,
        total_words_display=f"{summary.total_words:,}",
        average_sentiment_display=_one_decimal(summary.average_sentiment_score),
        average_characters_display=_round_half_up(summary.average_character_count),
    )


def build_recent_story_items(
    stories: Sequence[Story], *, limit: int = DEFAULT_RECENT_LIMIT
) -> list[RecentStoryItem]:
    """Project the newest analyzed stories, most recent first."""
    if limit <= 0:
        return []
    items: list[RecentStoryItem] = []
    for story in reversed(stories[-limit:]):
        if story.analysis is None:
            continue
        items.append(
            RecentStoryItem(
                story_id=story.story_id,
                title=story.title,
                author=story.author,
                word_count=story.analysis.word_count,
                uploaded_on=format_upload_date(story.upload_date),
            )
        )
    return items


def build_story_detail_view(story: Story) -> StoryDetailView:
    """Project one analyzed story into its details panel."""
    analysis = story.analysis
    if analysis is None:
        raise ValueError(f"Story '{story.story_id}' has not been analyzed.")
    return StoryDetailView(
        story_id=story.story_id,
        title=story.title,
        byline=(
            f"by {story.author} • {story.genre_label} • {format_upload_date(story.upload_date)}"
        ),
        word_count=analysis.word_count,
        sentence_count=analysis.sentence_count,
        reading_time=analysis.reading_time,
        sentiment=analysis.sentiment,
        complexity=analysis.complexity,
        character_tags=[
            f"{character.name} ({character.mentions} mentions)"
            for character in analysis.characters
        ],
        theme_tags=[theme.theme for theme in analysis.themes],
    )


def build_sentiment_chart(summary: StoryCollectionSummary) -> ChartSeries:
    return ChartSeries(
        title="Sentiment Distribution",
        labels=[bucket.capitalize() for bucket in SENTIMENT_BUCKETS],
        values=[summary.sentiment_distribution[bucket] for bucket in SENTIMENT_BUCKETS],
    )


def build_genre_chart(summary: StoryCollectionSummary) -> ChartSeries:
    return ChartSeries(
        title="Stories by Genre",
        labels=list(summary.genre_distribution),
        values=list(summary.genre_distribution.values()),
    )


def build_dashboard_read_model(
    stories: Sequence[Story], *, recent_limit: int = DEFAULT_RECENT_LIMIT
) -> DashboardReadModel:
    """Compose every dashboard panel from the current story sequence."""
    summary = summarize_stories(stories)
    return DashboardReadModel(
        has_data=summary.has_data,
        overview=build_dashboard_overview(summary),
        recent_stories=build_recent_story_items(stories, limit=recent_limit),
        sentiment_chart=build_sentiment_chart(summary),
        genre_chart=build_genre_chart(summary),
    )
