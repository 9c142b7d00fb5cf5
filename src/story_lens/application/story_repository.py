"""Ordered story collection persisted as one blob."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from story_lens.core.errors import PersistenceFailure
from story_lens.core.story_schema import Story, dump_stories_json, load_stories_json
from story_lens.domain.ports import StoryBlobStore

logger = logging.getLogger(__name__)

DEFAULT_STORE_KEY = "analyzedStories"
UNPARSABLE_BACKUP_SUFFIX = ".unparsable"


class StoryRepository:
    """Hold submitted stories in insertion order and persist the whole sequence.

    A failed write keeps the story in memory and flags unsaved changes; call
    ``flush`` to retry. A failed read at load time starts the repository
    empty, and the next write re-reads the store and merges before saving.
    An unparsable blob is copied to ``<key>.unparsable`` before it is replaced.
    """

    def __init__(self, store: StoryBlobStore, *, key: str = DEFAULT_STORE_KEY) -> None:
        self._store = store
        self._key = key
        self._stories: list[Story] = []
        self._unsaved = False
        self._needs_reconcile = False
        self._unparsable_payload: str | None = None

    @classmethod
    def open(cls, store: StoryBlobStore, *, key: str = DEFAULT_STORE_KEY) -> StoryRepository:
        """Build a repository and load any previously persisted stories."""
        repository = cls(store, key=key)
        repository.load()
        return repository

    @property
    def backup_key(self) -> str:
        return f"{self._key}{UNPARSABLE_BACKUP_SUFFIX}"

    def load(self) -> list[Story]:
        """Replace in-memory state with persisted stories.

        Unsaved stories are flushed first, so a failing store raises
        PersistenceFailure here instead of discarding them. Missing or bad
        data loads empty.
        """
        if self._unsaved:
            self.flush()
        self._needs_reconcile = False
        self._unparsable_payload = None
        try:
            payload = self._store.read_blob(self._key)
        except PersistenceFailure as exc:
            logger.warning(
                "repository.load_degraded key=%s reason=read_failed error=%s", self._key, exc
            )
            self._needs_reconcile = True
            self._stories = []
        else:
            self._stories = self._parse(payload)
        logger.info("repository.load key=%s stories=%s", self._key, len(self._stories))
        return list(self._stories)

    def _parse(self, payload: str | None) -> list[Story]:
        if payload is None:
            return []
        try:
            return load_stories_json(payload)
        except ValidationError as exc:
            logger.warning(
                "repository.load_degraded key=%s reason=unparsable errors=%s",
                self._key,
                exc.error_count(),
            )
            self._unparsable_payload = payload
            return []

    def _reconcile_with_store(self) -> None:
        persisted = self._parse(self._store.read_blob(self._key))
        persisted_ids = {story.story_id for story in persisted}
        pending = [story for story in self._stories if story.story_id not in persisted_ids]
        self._stories = [*persisted, *pending]
        self._needs_reconcile = False
        logger.info(
            "repository.reconciled key=%s persisted=%s pending=%s",
            self._key,
            len(persisted),
            len(pending),
        )

    def append(self, story: Story) -> None:
        """Add an analyzed story and persist the entire sequence."""
        if not story.is_analyzed:
            raise ValueError(f"Story '{story.story_id}' must be analyzed before it is stored.")
        if self.find_by_id(story.story_id) is not None:
            raise ValueError(f"Story id '{story.story_id}' is already stored.")
        self._stories.append(story)
        self._unsaved = True
        try:
            self.flush()
        except PersistenceFailure as exc:
            raise PersistenceFailure(str(exc), story=story) from exc

    def flush(self) -> None:
        """Write the whole in-memory sequence to the store."""
        try:
            if self._needs_reconcile:
                self._reconcile_with_store()
            if self._unparsable_payload is not None:
                self._store.write_blob(self.backup_key, self._unparsable_payload)
                logger.warning(
                    "repository.unparsable_backed_up key=%s backup_key=%s",
                    self._key,
                    self.backup_key,
                )
                self._unparsable_payload = None
            self._store.write_blob(self._key, dump_stories_json(self._stories))
        except PersistenceFailure:
            logger.error(
                "repository.persist_failed key=%s stories=%s", self._key, len(self._stories)
            )
            raise
        self._unsaved = False
        logger.info("repository.persisted key=%s stories=%s", self._key, len(self._stories))

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved

    def all(self) -> tuple[Story, ...]:
        return tuple(self._stories)

    def find_by_id(self, story_id: str) -> Story | None:
        for story in self._stories:
            if story.story_id == story_id:
                return story
        return None

    def recent(self, n: int) -> list[Story]:
        """Return the last n stories, most recent first."""
        if n <= 0:
            return []
        return list(reversed(self._stories[-n:]))

    def __len__(self) -> int:
        return len(self._stories)
