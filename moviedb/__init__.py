"""Persistence layer for genres and movies backed by SQLite."""

from moviedb.db import Database, DataAccessError, GenreDao, MovieDao
from moviedb.models import Genre, Movie

__all__ = ["Database", "DataAccessError", "GenreDao", "MovieDao", "Genre", "Movie"]
