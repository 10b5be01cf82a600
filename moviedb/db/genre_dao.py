"""Data access for the ``genre`` table."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from typing import Optional

from moviedb.db.database import Database
from moviedb.db.errors import DataAccessError
from moviedb.models.genre import Genre

logger = logging.getLogger(__name__)


class GenreDao:
    """List, look up and insert genres. Holds no state between calls."""

    def __init__(self, db: Database):
        self._db = db

    # -- Read ------------------------------------------------------------------

    def list_genres(self) -> list[Genre]:
        sql = "SELECT * FROM genre"
        logger.debug(sql)
        try:
            with self._db.connection() as conn, closing(conn.execute(sql)) as cursor:
                return [Genre.from_row(r) for r in cursor.fetchall()]
        except sqlite3.Error as e:
            logger.error(f"Error listing genres from database: {e}")
            raise DataAccessError("Error listing genres from database", e) from e

    def get_genre(self, name: str) -> Optional[Genre]:
        """Exact, case-sensitive lookup; returns the first match or ``None``."""
        sql = "SELECT * FROM genre WHERE name = ?"
        logger.debug(f"{sql} [{name!r}]")
        try:
            with self._db.connection() as conn, closing(conn.execute(sql, (name,))) as cursor:
                row = cursor.fetchone()
                return Genre.from_row(row) if row else None
        except sqlite3.Error as e:
            logger.error(f"Error fetching genre {name!r}: {e}")
            raise DataAccessError(f"Error fetching genre: {name}", e) from e

    # -- Create ----------------------------------------------------------------

    def add_genre(self, name: str) -> None:
        sql = "INSERT INTO genre(name) VALUES(?)"
        try:
            with self._db.connection() as conn, closing(conn.execute(sql, (name,))):
                pass
        except sqlite3.Error as e:
            logger.error(f"Error adding genre {name!r}: {e}")
            raise DataAccessError(f"Error adding genre: {name}", e) from e
        logger.info(f"Added genre {name!r}")
