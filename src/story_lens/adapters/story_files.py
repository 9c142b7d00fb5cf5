"""Read story text from uploaded files."""

from __future__ import annotations

from pathlib import Path


def load_story_text(path: Path) -> str:
    """Read a text file as UTF-8, replacing undecodable bytes."""
    return path.read_bytes().decode("utf-8", errors="replace")
