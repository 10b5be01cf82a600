"""Database layer: SQLite connection provider and the genre/movie DAOs."""

from moviedb.db.database import Database, generated_key
from moviedb.db.errors import DataAccessError
from moviedb.db.genre_dao import GenreDao
from moviedb.db.movie_dao import MovieDao
from moviedb.db.schema import SCHEMA_DDL

__all__ = ["Database", "generated_key", "DataAccessError", "GenreDao", "MovieDao", "SCHEMA_DDL"]
