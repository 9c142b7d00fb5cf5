"""Story submission workflow: validate, analyze, then append."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from functools import partial
from uuid import uuid4

from story_lens.adapters.blob_store_factory import create_blob_store
from story_lens.adapters.observability import configure_runtime_logging
from story_lens.application.story_repository import StoryRepository
from story_lens.core.dashboard_views import DashboardReadModel, build_dashboard_read_model
from story_lens.core.errors import (
    AnalysisFailure,
    StoryValidationError,
    SubmissionInProgressError,
)
from story_lens.core.story_analysis_pipeline import analyze_story
from story_lens.core.story_schema import Story, StoryAnalysis, StoryDraft, utc_now_iso
from story_lens.core.text_metrics import count_words
from story_lens.settings import RuntimeSettings, load_runtime_settings

logger = logging.getLogger(__name__)

StoryAnalyzer = Callable[[str], Awaitable[StoryAnalysis]]


def validate_story_draft(draft: StoryDraft, *, min_word_count: int = 100) -> None:
    """Reject drafts whose content is below the minimum word threshold."""
    word_count = count_words(draft.content)
    if word_count < min_word_count:
        raise StoryValidationError(word_count=word_count, min_word_count=min_word_count)


class StorySubmissionService:
    """Run one submission at a time through analysis into the repository."""

    def __init__(
        self,
        repository: StoryRepository,
        *,
        settings: RuntimeSettings | None = None,
        analyzer: StoryAnalyzer | None = None,
    ) -> None:
        self._repository = repository
        self._settings = settings or RuntimeSettings()
        self._analyzer: StoryAnalyzer = analyzer or partial(
            analyze_story, delay_seconds=self._settings.analysis_delay_seconds
        )
        self._in_progress = False

    @property
    def repository(self) -> StoryRepository:
        return self._repository

    @property
    def settings(self) -> RuntimeSettings:
        return self._settings

    @property
    def in_progress(self) -> bool:
        """True while an analysis is awaiting completion."""
        return self._in_progress

    async def submit(self, draft: StoryDraft) -> Story:
        """Validate and analyze a draft, then store it as a new story.

        Raises StoryValidationError before any work starts, AnalysisFailure
        when the analyzer fails (nothing is stored), and PersistenceFailure
        when the stored sequence could not be written.
        """
        try:
            validate_story_draft(draft, min_word_count=self._settings.min_word_count)
        except StoryValidationError as exc:
            logger.info(
                "submission.rejected title=%r words=%s min_words=%s",
                draft.title,
                exc.word_count,
                exc.min_word_count,
            )
            raise
        if self._in_progress:
            raise SubmissionInProgressError("Another story is still being analyzed.")

        self._in_progress = True
        try:
            try:
                analysis = await self._analyzer(draft.content)
            except Exception as exc:
                logger.exception("submission.analysis_failed title=%r", draft.title)
                raise AnalysisFailure(f"Analysis failed for story {draft.title!r}.") from exc
            story = Story(
                story_id=uuid4().hex,
                title=draft.title,
                author=draft.author,
                genre=draft.genre,
                content=draft.content,
                upload_date=utc_now_iso(),
                analysis=analysis,
            )
            self._repository.append(story)
        finally:
            self._in_progress = False
        logger.info(
            "submission.stored story_id=%s words=%s sentiment=%s",
            story.story_id,
            analysis.word_count,
            analysis.sentiment,
        )
        return story

    def dashboard(self) -> DashboardReadModel:
        """Project the stored stories into the dashboard, sized by recent_limit."""
        return build_dashboard_read_model(
            self._repository.all(), recent_limit=self._settings.recent_limit
        )


def build_story_service(settings: RuntimeSettings | None = None) -> StorySubmissionService:
    """Wire settings, blob store, and repository into a ready submission service."""
    resolved = settings or load_runtime_settings()
    store = create_blob_store(backend=resolved.store_backend, db_path=resolved.db_path)
    repository = StoryRepository.open(store, key=resolved.store_key)
    return StorySubmissionService(repository, settings=resolved)


def start_story_service(settings: RuntimeSettings | None = None) -> StorySubmissionService:
    """Host entry point: configure process logging, then build the service."""
    resolved = settings or load_runtime_settings()
    configure_runtime_logging(resolved)
    return build_story_service(resolved)
