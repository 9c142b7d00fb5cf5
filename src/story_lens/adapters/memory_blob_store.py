"""Process-local blob store for tests and throwaway sessions."""

from __future__ import annotations


class InMemoryBlobStore:
    """Keep blobs in a dict; nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._blobs: dict[str, str] = dict(initial or {})

    def read_blob(self, key: str) -> str | None:
        return self._blobs.get(key)

    def write_blob(self, key: str, payload: str) -> None:
        self._blobs[key] = payload
