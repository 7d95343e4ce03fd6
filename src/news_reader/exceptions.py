from __future__ import annotations

from typing import Optional


class LoadError(Exception):
    """Raised when the article collection cannot be fetched or parsed."""


class RecordError(ValueError):
    """Raised when a single data-source record cannot be parsed into an Article."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
