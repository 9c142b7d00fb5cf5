from __future__ import annotations

import json

import pytest

from story_lens.adapters.memory_blob_store import InMemoryBlobStore
from story_lens.application.story_repository import StoryRepository
from story_lens.core.errors import PersistenceFailure
from story_lens.core.story_schema import Story, StoryAnalysis


def _analysis(word_count: int = 120) -> StoryAnalysis:
    return StoryAnalysis(
        word_count=word_count,
        sentence_count=6,
        paragraph_count=2,
        sentiment="neutral",
        sentiment_score=1,
        characters=[],
        themes=[],
        reading_time=1,
        complexity="low",
    )


def _story(index: int) -> Story:
    return Story(
        story_id=f"story-{index}",
        title=f"Story {index}",
        author="Mara",
        genre="Fantasy",
        content="filler " * 100,
        upload_date="2026-10-18T12:00:00+00:00",
        analysis=_analysis(100 + index),
    )


class _FlakyStore(InMemoryBlobStore):
    def __init__(self) -> None:
        super().__init__()
        self.fail_writes = False
        self.fail_reads = False

    def read_blob(self, key: str) -> str | None:
        if self.fail_reads:
            raise PersistenceFailure("store offline")
        return super().read_blob(key)

    def write_blob(self, key: str, payload: str) -> None:
        if self.fail_writes:
            raise PersistenceFailure("disk full")
        super().write_blob(key, payload)


def test_append_persists_and_reload_round_trips() -> None:
    store = InMemoryBlobStore()
    repository = StoryRepository.open(store)
    for index in range(3):
        repository.append(_story(index))

    reloaded = StoryRepository.open(store)
    assert reloaded.all() == repository.all()
    assert [story.story_id for story in reloaded.all()] == ["story-0", "story-1", "story-2"]


def test_persisted_blob_uses_camel_case_records() -> None:
    store = InMemoryBlobStore()
    repository = StoryRepository(store, key="analyzedStories")
    repository.append(_story(1))

    payload = store.read_blob("analyzedStories")
    assert payload is not None
    records = json.loads(payload)
    assert records[0]["id"] == "story-1"
    assert records[0]["uploadDate"] == "2026-10-18T12:00:00+00:00"
    assert records[0]["analysis"]["wordCount"] == 101
    assert records[0]["analysis"]["sentimentScore"] == 1


def test_loads_records_written_by_browser_client() -> None:
    record = {
        "title": "Lanterns",
        "author": "Ines",
        "genre": "",
        "content": "filler " * 100,
        "uploadDate": "2026-01-02T03:04:05.000Z",
        "id": "1767323045000",
        "analysis": {
            "wordCount": 101,
            "sentenceCount": 1,
            "paragraphCount": 1,
            "sentiment": "neutral",
            "sentimentScore": 0,
            "characters": [{"name": "Ines", "mentions": 2}],
            "themes": [{"theme": "Mystery", "strength": 1}],
            "readingTime": 1,
            "complexity": "low",
        },
    }
    store = InMemoryBlobStore({"analyzedStories": json.dumps([record])})
    repository = StoryRepository.open(store)

    story = repository.find_by_id("1767323045000")
    assert story is not None
    assert story.analysis is not None
    assert story.analysis.characters[0].name == "Ines"
    assert story.genre_label == "Unknown"


def test_append_rejects_unanalyzed_and_duplicate_stories() -> None:
    repository = StoryRepository(InMemoryBlobStore())
    with pytest.raises(ValueError, match="must be analyzed"):
        repository.append(_story(1).model_copy(update={"analysis": None}))

    repository.append(_story(1))
    with pytest.raises(ValueError, match="already stored"):
        repository.append(_story(1))
    assert len(repository) == 1


def test_find_by_id_hits_and_misses() -> None:
    repository = StoryRepository(InMemoryBlobStore())
    repository.append(_story(1))
    repository.append(_story(2))
    found = repository.find_by_id("story-2")
    assert found is not None
    assert found.title == "Story 2"
    assert repository.find_by_id("missing") is None


def test_recent_returns_latest_first() -> None:
    repository = StoryRepository(InMemoryBlobStore())
    for index in range(1, 9):
        repository.append(_story(index))

    recent = repository.recent(5)
    assert [story.story_id for story in recent] == [
        "story-8",
        "story-7",
        "story-6",
        "story-5",
        "story-4",
    ]
    assert len(repository.recent(20)) == 8
    assert repository.recent(0) == []


@pytest.mark.parametrize("payload", ["not json", '{"id": "x"}', '[{"unexpected": 1}]'])
def test_unusable_payload_loads_as_empty(payload: str) -> None:
    repository = StoryRepository.open(InMemoryBlobStore({"analyzedStories": payload}))
    assert repository.all() == ()


def test_missing_key_loads_as_empty() -> None:
    assert StoryRepository.open(InMemoryBlobStore()).all() == ()


def test_read_failure_degrades_to_empty() -> None:
    store = _FlakyStore()
    store.fail_reads = True
    repository = StoryRepository.open(store)
    assert len(repository) == 0
    assert repository.has_unsaved_changes is False


def test_write_failure_is_surfaced_and_flush_retries() -> None:
    store = _FlakyStore()
    repository = StoryRepository.open(store)
    store.fail_writes = True
    story = _story(1)

    with pytest.raises(PersistenceFailure, match="disk full") as excinfo:
        repository.append(story)

    assert excinfo.value.story == story
    assert repository.all() == (story,)
    assert repository.has_unsaved_changes is True
    assert store.read_blob("analyzedStories") is None

    with pytest.raises(PersistenceFailure):
        repository.flush()
    assert repository.has_unsaved_changes is True

    store.fail_writes = False
    repository.flush()
    assert repository.has_unsaved_changes is False
    assert StoryRepository.open(store).all() == (story,)


def test_append_after_failed_startup_read_merges_with_persisted_stories() -> None:
    store = _FlakyStore()
    seeded = StoryRepository.open(store)
    for index in range(3):
        seeded.append(_story(index))

    store.fail_reads = True
    repository = StoryRepository.open(store)
    assert repository.all() == ()

    store.fail_reads = False
    repository.append(_story(99))

    reloaded = StoryRepository.open(store)
    assert [story.story_id for story in reloaded.all()] == [
        "story-0",
        "story-1",
        "story-2",
        "story-99",
    ]
    assert repository.all() == reloaded.all()


def test_append_refuses_write_while_store_is_still_unreadable() -> None:
    store = _FlakyStore()
    seeded = StoryRepository.open(store)
    seeded.append(_story(0))
    persisted = store.read_blob("analyzedStories")

    store.fail_reads = True
    repository = StoryRepository.open(store)
    story = _story(99)
    with pytest.raises(PersistenceFailure, match="store offline") as excinfo:
        repository.append(story)

    assert excinfo.value.story == story
    assert repository.all() == (story,)
    assert repository.has_unsaved_changes is True
    store.fail_reads = False
    assert store.read_blob("analyzedStories") == persisted


def test_unparsable_blob_is_backed_up_before_overwrite() -> None:
    store = InMemoryBlobStore({"analyzedStories": "not json"})
    repository = StoryRepository.open(store)
    repository.append(_story(1))

    assert store.read_blob("analyzedStories.unparsable") == "not json"
    assert [story.story_id for story in StoryRepository.open(store).all()] == ["story-1"]


def test_load_flushes_unsaved_stories_first() -> None:
    store = _FlakyStore()
    repository = StoryRepository.open(store)
    store.fail_writes = True
    with pytest.raises(PersistenceFailure):
        repository.append(_story(1))

    with pytest.raises(PersistenceFailure, match="disk full"):
        repository.load()
    assert repository.all() == (_story(1),)
    assert repository.has_unsaved_changes is True

    store.fail_writes = False
    assert repository.load() == [_story(1)]
    assert repository.has_unsaved_changes is False
