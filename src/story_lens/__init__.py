"""Deterministic story metrics, persistence, and dashboard aggregation."""

from story_lens.core.story_analysis_pipeline import analyze_story, analyze_story_text
from story_lens.core.story_schema import Story, StoryAnalysis, StoryDraft

__all__ = [
    "Story",
    "StoryAnalysis",
    "StoryDraft",
    "analyze_story",
    "analyze_story_text",
]
