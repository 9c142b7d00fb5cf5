"""Error kinds surfaced to callers of the story workflow."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from story_lens.core.story_schema import Story


class StoryLensError(Exception):
    """Base class for recoverable story workflow failures."""


class StoryValidationError(StoryLensError, ValueError):
    """Raised when submitted content is below the minimum word threshold."""

    def __init__(self, *, word_count: int, min_word_count: int) -> None:
        super().__init__(
            f"Story content has {word_count} words; at least {min_word_count} are required."
        )
        self.word_count = word_count
        self.min_word_count = min_word_count


class AnalysisFailure(StoryLensError, RuntimeError):
    """Raised when the analysis pipeline could not produce a complete result."""


class PersistenceFailure(StoryLensError, RuntimeError):
    """Raised when the blob store could not be read or written."""

    def __init__(self, message: str, *, story: Story | None = None) -> None:
        super().__init__(message)
        self.story = story


class SubmissionInProgressError(StoryLensError, RuntimeError):
    """Raised when a submission arrives while another analysis is still pending."""
