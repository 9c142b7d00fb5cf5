"""Canonical story and analysis records shared by pipeline, repository, and views."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from story_lens.core.sentiment import SentimentLabel
from story_lens.core.text_metrics import ComplexityTier

UNKNOWN_GENRE: Final = "Unknown"
MAX_CHARACTERS: Final = 5
MAX_THEMES: Final = 3


def utc_now_iso() -> str:
    """Return current UTC timestamp in ISO-8601 form."""
    return datetime.now(UTC).isoformat()


class SchemaModel(BaseModel):
    """Strict model configuration with camelCase wire names."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CharacterMention(SchemaModel):
    """A recurring capitalized token treated as a candidate character."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=3)
    mentions: int = Field(ge=2)


class ThemeStrength(SchemaModel):
    """Keyword hit total for one theme."""

    model_config = ConfigDict(frozen=True)

    theme: str = Field(min_length=1)
    strength: int = Field(ge=1)


class StoryAnalysis(SchemaModel):
    """Complete, immutable analysis result for one story text."""

    model_config = ConfigDict(frozen=True)

    word_count: int = Field(ge=0)
    sentence_count: int = Field(ge=1)
    paragraph_count: int = Field(ge=1)
    sentiment: SentimentLabel
    sentiment_score: int
    characters: list[CharacterMention] = Field(default_factory=list, max_length=MAX_CHARACTERS)
    themes: list[ThemeStrength] = Field(default_factory=list, max_length=MAX_THEMES)
    reading_time: int = Field(ge=0)
    complexity: ComplexityTier


class StoryDraft(SchemaModel):
    """Candidate story submitted by the presentation layer."""

    title: str
    author: str
    genre: str = ""
    content: str


class Story(SchemaModel):
    """Submitted story metadata plus its analysis once the pipeline completes."""

    model_config = ConfigDict(frozen=True)

    story_id: str = Field(alias="id", min_length=1)
    title: str
    author: str
    genre: str = ""
    content: str
    upload_date: str = Field(default_factory=utc_now_iso)
    analysis: StoryAnalysis | None = None

    @property
    def is_analyzed(self) -> bool:
        return self.analysis is not None

    @property
    def genre_label(self) -> str:
        """Genre used for grouping; empty genres fold into a shared bucket."""
        return self.genre or UNKNOWN_GENRE


STORY_LIST_ADAPTER: Final = TypeAdapter(list[Story])


def dump_stories_json(stories: list[Story] | tuple[Story, ...]) -> str:
    """Serialize an ordered story sequence to its persisted JSON form."""
    return STORY_LIST_ADAPTER.dump_json(list(stories), by_alias=True, exclude_none=True).decode(
        "utf-8"
    )


def load_stories_json(payload: str) -> list[Story]:
    """Parse a persisted story sequence; raises pydantic.ValidationError on bad input."""
    return STORY_LIST_ADAPTER.validate_json(payload)
