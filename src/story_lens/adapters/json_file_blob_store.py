"""File-per-key blob store writing plain JSON documents."""

from __future__ import annotations

import re
from pathlib import Path

from story_lens.core.errors import PersistenceFailure

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.-]+")


class JsonFileBlobStore:
    """Persist each key as ``<key>.json`` under one directory, replaced atomically."""

    def __init__(self, root_dir: Path) -> None:
        self._root_dir = root_dir

    def _path_for(self, key: str) -> Path:
        safe_key = _UNSAFE_KEY_CHARS.sub("_", key).strip("._")
        if not safe_key:
            raise ValueError("Blob key must contain at least one safe character.")
        return self._root_dir / f"{safe_key}.json"

    def read_blob(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceFailure(f"Could not read blob file {path}: {exc}") from exc

    def write_blob(self, key: str, payload: str) -> None:
        path = self._path_for(key)
        staging = path.with_name(f"{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            staging.write_text(payload, encoding="utf-8")
            staging.replace(path)
        except OSError as exc:
            raise PersistenceFailure(f"Could not write blob file {path}: {exc}") from exc
