#!/usr/bin/env python3
"""Initialize the database and optionally seed it with genres and movies from YAML."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from moviedb.config import configure_logging
from moviedb.db.database import Database
from moviedb.db.errors import DataAccessError
from moviedb.db.genre_dao import GenreDao
from moviedb.db.movie_dao import MovieDao
from moviedb.models.movie import Movie

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the movie database")
    parser.add_argument("--seed", type=str, help="YAML file with genre and movie definitions")
    parser.add_argument("--db-path", type=str, help="Override database path")
    parser.add_argument("--log-level", type=str, help="Logging level (default from MOVIEDB_LOG_LEVEL)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    db = Database(path=Path(args.db_path) if args.db_path else None)
    db.init()
    print(f"Database initialized at: {db.path}")

    if args.seed:
        seed(db, Path(args.seed))

    print("Done.")
    return 0


def seed(db: Database, path: Path) -> None:
    import yaml
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    genres = GenreDao(db)
    for name in data.get("genres", []):
        if genres.get_genre(name) is not None:
            print(f"  Genre exists: {name}")
            continue
        genres.add_genre(name)
        print(f"  Created genre: {name}")

    movies = MovieDao(db)
    for m in data.get("movies", []):
        genre = genres.get_genre(m["genre"])
        if genre is None:
            print(f"  Skipping {m.get('title', '?')}: unknown genre {m['genre']!r}")
            continue
        released = m.get("release_date")
        if isinstance(released, str):
            released = date.fromisoformat(released)
        try:
            movie = movies.add_movie(Movie(
                id=0,
                title=m["title"],
                release_date=released,
                genre=genre,
                duration=int(m.get("duration", 0)),
                director=m.get("director", ""),
                summary=m.get("summary", ""),
            ))
            print(f"  Created movie: {movie.title} (id={movie.id})")
        except DataAccessError as e:
            logger.warning(f"Skipping {m.get('title', '?')}: {e}")


if __name__ == "__main__":
    sys.exit(main())
