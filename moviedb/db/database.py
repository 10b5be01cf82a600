"""Connection provider: one short-lived SQLite connection per operation."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from moviedb.db.schema import SCHEMA_DDL

logger = logging.getLogger(__name__)


class Database:
    """
    Hands out ready-to-use SQLite connections.

    Every call to ``connection()`` opens a fresh connection with foreign keys
    enabled and rows addressable by column name. The connection commits when
    the block exits normally, rolls back when it raises, and is closed on
    every exit path.
    """

    def __init__(self, path: Optional[Path | str] = None, timeout: Optional[float] = None):
        from moviedb.config import get_database_config
        cfg = get_database_config()
        if path is None:
            self.path: Path = cfg.path
        elif isinstance(path, str):
            self.path = Path(path)
        else:
            self.path = path
        self.timeout = cfg.timeout if timeout is None else timeout

    # -- connection lifecycle --------------------------------------------------

    def _ensure_dir(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def connect(self) -> sqlite3.Connection:
        self._ensure_dir()
        conn = sqlite3.connect(str(self.path), timeout=self.timeout)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Scoped connection: commit on success, rollback on error, always close."""
        conn = self.connect()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init(self) -> None:
        """Create the genre and movie tables when they do not exist yet."""
        with self.connection() as conn:
            conn.executescript(SCHEMA_DDL)
        logger.info(f"Database schema ready at {self.path}")


def generated_key(conn: sqlite3.Connection, cursor: sqlite3.Cursor) -> int:
    """
    Return the primary key generated by the INSERT just run on ``cursor``.

    SQLite reports it as ``cursor.lastrowid``; when a driver leaves that unset
    the key is read back with ``last_insert_rowid()`` on the same connection.
    """
    if cursor.lastrowid:
        return int(cursor.lastrowid)
    row = conn.execute("SELECT last_insert_rowid()").fetchone()
    return int(row[0])
