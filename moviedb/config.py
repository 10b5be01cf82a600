"""
Central configuration loader.
Reads from environment variables (via .env) and configures logging.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# ---------------------------------------------------------------------------
# Load .env from repo root (if present)
# ---------------------------------------------------------------------------
_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get(key: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    val = os.getenv(key, default)
    if required and not val:
        raise EnvironmentError(f"Missing required environment variable: {key}")
    return val


# ---------------------------------------------------------------------------
# Database config
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class DatabaseConfig:
    path: Path
    timeout: float


def get_db_path() -> Path:
    """Database file; a relative MOVIEDB_DB_PATH is taken from the repo root."""
    override = _get("MOVIEDB_DB_PATH")
    if override:
        path = Path(override)
        return path if path.is_absolute() else _REPO_ROOT / path
    return _REPO_ROOT / "data" / "movies.db"


def get_database_config() -> DatabaseConfig:
    return DatabaseConfig(
        path=get_db_path(),
        timeout=float(_get("MOVIEDB_DB_TIMEOUT", default="5.0")),  # type: ignore[arg-type]
    )


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
def get_log_level() -> str:
    return (_get("MOVIEDB_LOG_LEVEL", default="INFO") or "INFO").upper()


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the process-wide logging format. Scripts call this; the library never does."""
    logging.basicConfig(
        level=getattr(logging, (level or get_log_level()).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
