"""Theme strength scoring from fixed keyword groups."""

from __future__ import annotations

from story_lens.core.lexicon import THEME_KEYWORDS, count_keyword_occurrences
from story_lens.core.story_schema import MAX_THEMES, ThemeStrength


def score_themes(text: str) -> dict[str, int]:
    """Return keyword hit totals for every theme in lexicon order."""
    lowered = text.lower()
    return {
        theme: count_keyword_occurrences(lowered, keywords)
        for theme, keywords in THEME_KEYWORDS.items()
    }


def detect_themes(text: str, *, limit: int = MAX_THEMES) -> list[ThemeStrength]:
    """Rank matched themes by strength; zero-hit themes are dropped."""
    matched = [(theme, strength) for theme, strength in score_themes(text).items() if strength > 0]
    ranked = sorted(matched, key=lambda item: item[1], reverse=True)
    return [ThemeStrength(theme=theme, strength=strength) for theme, strength in ranked[:limit]]
