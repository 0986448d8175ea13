# favscout/store.py
"""
SQLite result store.

One table, unique by favicon link. Inserting a link that is already present
is a silent no-op: the first digests recorded for a link are never replaced.
"""
from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Iterator, Optional, Union

from favscout.errors import StorageError
from favscout.logger import logger
from favscout.models import FaviconRecord

__all__ = ["ResultStore", "SCHEMA"]

SCHEMA = """
CREATE TABLE IF NOT EXISTS favicons (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    link TEXT UNIQUE,
    md5 TEXT,
    sha256 TEXT
);
"""


class ResultStore:
    """Explicit handle on the favicon database; open once per run, close at the end."""

    def __init__(self, connection: sqlite3.Connection, path: Union[str, Path] = ":memory:") -> None:
        self._conn = connection
        self.path = path

    @classmethod
    def open(cls, path: Union[str, Path]) -> ResultStore:
        try:
            conn = sqlite3.connect(str(path))
        except sqlite3.Error as exc:
            raise StorageError(f"Error opening database {path}: {exc}") from exc
        logger.debug("Opened result store %s", path)
        return cls(conn, path)

    def __enter__(self) -> ResultStore:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def ensure_schema(self) -> None:
        """Create the favicons table if it does not exist yet. Safe on every start."""
        try:
            with self._conn:
                self._conn.executescript(SCHEMA)
        except sqlite3.Error as exc:
            raise StorageError(f"Error creating table: {exc}") from exc

    def insert_if_absent(self, link: str, md5: str, sha256: str) -> bool:
        """
        Record a favicon unless *link* is already stored.

        Returns True when a new row was written, False for a duplicate link.
        Raises StorageError only on genuine database failures.
        """
        try:
            with self._conn:
                cur = self._conn.execute(
                    "INSERT OR IGNORE INTO favicons(link, md5, sha256) VALUES(?, ?, ?)",
                    (link, md5, sha256),
                )
        except sqlite3.Error as exc:
            raise StorageError(f"Error saving to database for {link}: {exc}", link=link) from exc
        return cur.rowcount == 1

    def get(self, link: str) -> Optional[FaviconRecord]:
        try:
            row = self._conn.execute(
                "SELECT link, md5, sha256 FROM favicons WHERE link = ?", (link,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise StorageError(f"Error reading {link}: {exc}", link=link) from exc
        return FaviconRecord(*row) if row else None

    def records(self) -> Iterator[FaviconRecord]:
        try:
            rows = self._conn.execute("SELECT link, md5, sha256 FROM favicons ORDER BY id").fetchall()
        except sqlite3.Error as exc:
            raise StorageError(f"Error reading favicons: {exc}") from exc
        for row in rows:
            yield FaviconRecord(*row)

    def count(self) -> int:
        try:
            (n,) = self._conn.execute("SELECT COUNT(*) FROM favicons").fetchone()
        except sqlite3.Error as exc:
            raise StorageError(f"Error counting favicons: {exc}") from exc
        return n
