"""Error type raised by the data-access layer."""

from __future__ import annotations

from typing import Optional


class DataAccessError(RuntimeError):
    """A database operation failed; the driver error is kept as ``cause``."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
