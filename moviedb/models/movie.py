"""Movie domain model and the joined-row mapping it is built from."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from moviedb.models.genre import Genre


def parse_release_date(value: Any) -> Optional[date]:
    """
    Convert a stored ``release_date`` value into a date.

    The value is read as a full timestamp and truncated to its date part, so
    every representation SQLite may hold for a DATE column is accepted:

    * ``None`` -> ``None``
    * ISO text, with or without a time-of-day (``2024-03-15``,
      ``2024-03-15 00:00:00``, ``2024-03-15T10:30:00``)
    * integer/float epoch milliseconds, read in local time (JDBC-style drivers)
    * ``datetime``/``date`` objects already converted by the driver

    Raises ``ValueError`` or ``TypeError`` for anything else.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Unsupported release_date value: {value!r}")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000).date()
        except (OverflowError, OSError) as e:
            raise ValueError(f"release_date out of range: {value!r}") from e
    if isinstance(value, bytes):
        value = value.decode("utf-8")
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return parse_release_date(int(text))
        return datetime.fromisoformat(text).date()
    raise TypeError(f"Unsupported release_date value: {value!r}")


@dataclass(frozen=True)
class Movie:
    """A movie together with its full genre; ``id`` is 0 until persisted."""

    id: int
    title: str
    release_date: Optional[date]
    genre: Genre
    duration: int
    director: str
    summary: str

    def release_date_param(self) -> Optional[str]:
        """Pure-date SQL parameter for ``release_date`` (NULL when unknown)."""
        return self.release_date.isoformat() if self.release_date is not None else None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Movie":
        """Build a Movie from one row of the ``movie JOIN genre`` query."""
        return cls(
            id=int(row["idmovie"]),
            title=row["title"],
            release_date=parse_release_date(row["release_date"]),
            genre=Genre.from_row(row),
            duration=int(row["duration"] or 0),
            director=row["director"],
            summary=row["summary"],
        )
