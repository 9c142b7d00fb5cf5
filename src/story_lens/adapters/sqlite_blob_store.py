"""SQLite-backed key/value blob persistence for the story collection."""

from __future__ import annotations

import sqlite3
from datetime import UTC, datetime
from pathlib import Path

from story_lens.core.errors import PersistenceFailure


class SQLiteBlobStore:
    """Persist one JSON blob per key in a single SQLite table."""

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._initialize_schema()
        except (OSError, sqlite3.Error) as exc:
            raise PersistenceFailure(f"Could not open blob store at {db_path}: {exc}") from exc

    def _connect(self) -> sqlite3.Connection:
        connection = sqlite3.connect(str(self._db_path))
        connection.row_factory = sqlite3.Row
        return connection

    def _initialize_schema(self) -> None:
        with self._connect() as connection:
            connection.execute(
                """
                CREATE TABLE IF NOT EXISTS blobs (
                    blob_key TEXT PRIMARY KEY,
                    payload TEXT NOT NULL,
                    updated_at_utc TEXT NOT NULL
                )
                """
            )

    def read_blob(self, key: str) -> str | None:
        """Load the blob stored under key, or None when absent."""
        try:
            with self._connect() as connection:
                row = connection.execute(
                    """
                    SELECT payload
                    FROM blobs
                    WHERE blob_key = ?
                    """,
                    (key,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise PersistenceFailure(f"Could not read blob '{key}': {exc}") from exc
        if row is None:
            return None
        return str(row["payload"])

    def write_blob(self, key: str, payload: str) -> None:
        """Replace the blob stored under key."""
        try:
            with self._connect() as connection:
                connection.execute(
                    """
                    INSERT INTO blobs (blob_key, payload, updated_at_utc)
                    VALUES (?, ?, ?)
                    ON CONFLICT(blob_key) DO UPDATE SET
                        payload = excluded.payload,
                        updated_at_utc = excluded.updated_at_utc
                    """,
                    (key, payload, datetime.now(UTC).isoformat()),
                )
        except sqlite3.Error as exc:
            raise PersistenceFailure(f"Could not write blob '{key}': {exc}") from exc
