"""Database schema DDL for the genre and movie tables."""

SCHEMA_DDL = """
PRAGMA foreign_keys = ON;

CREATE TABLE IF NOT EXISTS genre (
    idgenre     INTEGER PRIMARY KEY AUTOINCREMENT,
    name        TEXT
);

CREATE TABLE IF NOT EXISTS movie (
    idmovie         INTEGER PRIMARY KEY AUTOINCREMENT,
    title           TEXT,
    release_date    DATE NULL,
    genre_id        INTEGER REFERENCES genre(idgenre),
    duration        INTEGER,
    director        TEXT,
    summary         TEXT
);
"""
