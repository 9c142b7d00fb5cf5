"""Story repository and submission workflow."""

from story_lens.application.story_repository import StoryRepository
from story_lens.application.story_submission import (
    StorySubmissionService,
    build_story_service,
    start_story_service,
    validate_story_draft,
)
from story_lens.settings import RuntimeSettings, load_runtime_settings

__all__ = [
    "RuntimeSettings",
    "StoryRepository",
    "StorySubmissionService",
    "build_story_service",
    "load_runtime_settings",
    "start_story_service",
    "validate_story_draft",
]
