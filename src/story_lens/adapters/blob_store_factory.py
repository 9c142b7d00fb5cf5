"""Factory for selecting the story blob store backend."""

from __future__ import annotations

from pathlib import Path

from story_lens.adapters.json_file_blob_store import JsonFileBlobStore
from story_lens.adapters.memory_blob_store import InMemoryBlobStore
from story_lens.adapters.sqlite_blob_store import SQLiteBlobStore
from story_lens.domain.ports import StoryBlobStore

SUPPORTED_BACKENDS = ("sqlite", "json-file", "memory")


def create_blob_store(*, backend: str, db_path: Path) -> StoryBlobStore:
    """Build the configured blob store; json-file stores live beside db_path."""
    normalized = backend.strip().lower()
    if normalized in {"", "sqlite"}:
        return SQLiteBlobStore(db_path=db_path)
    if normalized == "json-file":
        return JsonFileBlobStore(root_dir=db_path.with_name(f"{db_path.stem}_blobs"))
    if normalized == "memory":
        return InMemoryBlobStore()
    raise RuntimeError(
        f"Unsupported STORY_LENS_STORE_BACKEND value {backend!r}. "
        f"Expected one of: {', '.join(SUPPORTED_BACKENDS)}."
    )
