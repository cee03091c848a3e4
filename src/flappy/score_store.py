"""
score_store.py: Best-score persistence.

The game only ever stores one number. Storage is best-effort: callers catch
ScoreStoreError and keep playing.
"""

import logging
import sqlite3
from contextlib import closing
from typing import Optional, Protocol

from .constants import DB_FILE, SCORE_KEY

logger = logging.getLogger(__name__)


class ScoreStoreError(Exception):
    """The backing store could not be read or written."""


class ScoreStore(Protocol):
    def read_best(self) -> int: ...

    def write_best(self, value: int) -> None: ...


def _coerce_best(raw) -> int:
    """Stored values that are not a non-negative integer count as no score."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring unreadable stored best score: {raw!r}")
        return 0
    if value < 0:
        logger.warning(f"Ignoring negative stored best score: {value}")
        return 0
    return value


class SqliteScoreStore:
    """Keeps the best score in a single SQLite row."""

    def __init__(self, db_file: str = DB_FILE, key: str = SCORE_KEY):
        self.db_file = db_file
        self.key = key

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_file)
        conn.execute("""
            CREATE TABLE IF NOT EXISTS Scores (
                name TEXT PRIMARY KEY,
                best INTEGER DEFAULT 0
            )
        """)
        return conn

    def read_best(self) -> int:
        """Returns the stored best score, 0 if none was ever written."""
        try:
            with closing(self._connect()) as conn:
                row: Optional[tuple] = conn.execute(
                    "SELECT best FROM Scores WHERE name=?", (self.key,)).fetchone()
        except (sqlite3.Error, OSError) as e:
            raise ScoreStoreError(f"Could not read best score from {self.db_file}: {e}") from e

        if row is None:
            return 0
        return _coerce_best(row[0])

    def write_best(self, value: int) -> None:
        """Stores the value unless a higher one is already there."""
        try:
            with closing(self._connect()) as conn:
                with conn:
                    conn.execute(
                        "INSERT OR IGNORE INTO Scores (name, best) VALUES (?, 0)", (self.key,))
                    conn.execute(
                        "UPDATE Scores SET best = MAX(best, ?) WHERE name=?", (value, self.key))
        except (sqlite3.Error, OSError) as e:
            raise ScoreStoreError(f"Could not write best score to {self.db_file}: {e}") from e
        logger.debug(f"Best score {value} written to {self.db_file}")


class MemoryScoreStore:
    """In-process store, used when saving is disabled and in tests."""

    def __init__(self, best: int = 0):
        self.best = best

    def read_best(self) -> int:
        return self.best

    def write_best(self, value: int) -> None:
        self.best = max(self.best, value)
