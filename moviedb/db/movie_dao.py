"""Data access for the ``movie`` table, always joined with ``genre`` on read."""

from __future__ import annotations

import dataclasses
import logging
import sqlite3
from contextlib import closing
from typing import Any

from moviedb.db.database import Database, generated_key
from moviedb.db.errors import DataAccessError
from moviedb.models.movie import Movie

logger = logging.getLogger(__name__)

_SELECT_JOINED = "SELECT * FROM movie JOIN genre ON movie.genre_id = genre.idgenre"

# Row mapping failures abort the whole listing just like driver errors.
_MAPPING_ERRORS = (sqlite3.Error, KeyError, IndexError, ValueError, TypeError)


class MovieDao:
    """
    List and insert movies.

    Reads use an inner join, so every returned Movie carries its full Genre;
    a movie whose ``genre_id`` matches no genre row is not returned.
    """

    def __init__(self, db: Database):
        self._db = db

    def _query(self, sql: str, params: tuple = ()) -> list[Movie]:
        logger.debug(f"{sql} {list(params)}")
        with self._db.connection() as conn, closing(conn.execute(sql, params)) as cursor:
            return [Movie.from_row(r) for r in cursor.fetchall()]

    # -- Read ------------------------------------------------------------------

    def list_movies(self) -> list[Movie]:
        try:
            return self._query(_SELECT_JOINED)
        except _MAPPING_ERRORS as e:
            logger.error(f"Error listing movies from database: {e}")
            raise DataAccessError("Error listing movies from database", e) from e

    def list_movies_by_genre(self, genre_name: str) -> list[Movie]:
        """Movies whose genre name matches ``genre_name`` exactly (case-sensitive)."""
        try:
            return self._query(f"{_SELECT_JOINED} WHERE genre.name = ?", (genre_name,))
        except _MAPPING_ERRORS as e:
            logger.error(f"Error fetching movies by genre {genre_name!r}: {e}")
            raise DataAccessError(f"Error fetching movies by genre: {genre_name}", e) from e

    # -- Create ----------------------------------------------------------------

    def add_movie(self, movie: Movie) -> Movie:
        """
        Insert ``movie`` and return a copy carrying the generated id.

        ``movie.genre.id`` must reference an existing genre row; otherwise the
        foreign-key constraint fails and nothing is persisted.
        """
        sql = (
            "INSERT INTO movie(title, release_date, genre_id, duration, director, summary) "
            "VALUES(?, ?, ?, ?, ?, ?)"
        )
        params: tuple[Any, ...] = (
            movie.title,
            movie.release_date_param(),
            movie.genre.id,
            movie.duration,
            movie.director,
            movie.summary,
        )
        try:
            with self._db.connection() as conn, closing(conn.execute(sql, params)) as cursor:
                new_id = generated_key(conn, cursor)
        except sqlite3.Error as e:
            logger.error(f"Error adding movie {movie.title!r}: {e}")
            raise DataAccessError("Error adding movie to database", e) from e
        logger.info(f"Added movie {movie.title!r} with id {new_id}")
        return dataclasses.replace(movie, id=new_id)
