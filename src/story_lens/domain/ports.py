"""Ports for story persistence."""

from __future__ import annotations

from typing import Protocol


class StoryBlobStore(Protocol):
    """Reads and writes one named blob per key.

    Implementations raise ``PersistenceFailure`` when the backend is unavailable.
    """

    def read_blob(self, key: str) -> str | None:
        ...

    def write_blob(self, key: str, payload: str) -> None:
        ...
