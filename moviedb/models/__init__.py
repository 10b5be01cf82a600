"""Domain models for the movie catalogue."""

from moviedb.models.genre import Genre
from moviedb.models.movie import Movie, parse_release_date

__all__ = ["Genre", "Movie", "parse_release_date"]
