"""Genre domain model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Genre:
    """A movie genre; ``id`` is assigned by the database on insert."""

    id: int
    name: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Genre":
        return cls(id=int(row["idgenre"]), name=row["name"])
