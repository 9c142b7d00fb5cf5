"""Process logging for hosts embedding the story workflow."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from story_lens.settings import RuntimeSettings

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
_configured_for: RuntimeSettings | None = None


def configure_runtime_logging(settings: RuntimeSettings, *, force: bool = False) -> None:
    """Route story_lens logs to the console and a size-capped rotating file.

    Repeated calls with the same settings are no-ops unless ``force`` is set.
    """
    global _configured_for
    if _configured_for == settings and not force:
        return

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    settings.log_path.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT)

    console = logging.StreamHandler()
    rotating_file = RotatingFileHandler(
        filename=settings.log_path,
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
        encoding="utf-8",
    )
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    for handler in (console, rotating_file):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger(__name__).info(
        "logging.configured level=%s path=%s max_bytes=%s backups=%s",
        logging.getLevelName(level),
        settings.log_path,
        settings.log_max_bytes,
        settings.log_backup_count,
    )
    _configured_for = settings
