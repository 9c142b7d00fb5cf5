"""Environment-driven runtime settings shared by every layer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def int_env(name: str, default: int, *, minimum: int, maximum: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, min(maximum, value))


def str_env(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


@dataclass(frozen=True)
class RuntimeSettings:
    """Knobs for storage, validation, dashboard size, the analysis delay, and logs."""

    store_backend: str = "sqlite"
    db_path: Path = Path("work/local/story_lens.db")
    store_key: str = "analyzedStories"
    min_word_count: int = 100
    analysis_delay_seconds: float = 0.0
    recent_limit: int = 5
    log_level: str = "INFO"
    log_path: Path = Path("work/logs/story_lens.log")
    log_max_bytes: int = 5 * 1024 * 1024
    log_backup_count: int = 10


def load_runtime_settings() -> RuntimeSettings:
    """Read settings from STORY_LENS_* environment variables."""
    defaults = RuntimeSettings()
    delay_ms = int_env("STORY_LENS_ANALYSIS_DELAY_MS", 0, minimum=0, maximum=60_000)
    return RuntimeSettings(
        store_backend=str_env("STORY_LENS_STORE_BACKEND", defaults.store_backend).lower(),
        db_path=Path(str_env("STORY_LENS_DB_PATH", str(defaults.db_path))),
        store_key=str_env("STORY_LENS_STORE_KEY", defaults.store_key),
        min_word_count=int_env(
            "STORY_LENS_MIN_WORD_COUNT", defaults.min_word_count, minimum=1, maximum=100_000
        ),
        analysis_delay_seconds=delay_ms / 1000,
        recent_limit=int_env(
            "STORY_LENS_RECENT_LIMIT", defaults.recent_limit, minimum=1, maximum=100
        ),
        log_level=str_env("STORY_LENS_LOG_LEVEL", defaults.log_level).upper(),
        log_path=Path(str_env("STORY_LENS_LOG_PATH", str(defaults.log_path))),
        log_max_bytes=int_env(
            "STORY_LENS_LOG_MAX_BYTES",
            defaults.log_max_bytes,
            minimum=64 * 1024,
            maximum=100 * 1024 * 1024,
        ),
        log_backup_count=int_env(
            "STORY_LENS_LOG_BACKUP_COUNT", defaults.log_backup_count, minimum=1, maximum=120
        ),
    )
