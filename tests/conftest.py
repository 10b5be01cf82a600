"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv()


@pytest.fixture(autouse=True)
def _isolated_db_path(monkeypatch, tmp_path):
    """Never let a test fall back to the real database file."""
    monkeypatch.setenv("MOVIEDB_DB_PATH", str(tmp_path / "default.db"))
