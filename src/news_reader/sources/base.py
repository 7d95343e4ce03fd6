from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict


class Source(ABC):
    """Abstract base class for an article data source."""

    def __init__(self, config: Dict[str, Any]):
        self.config = config

    @abstractmethod
    async def fetch_records(self) -> Any:
        """Return the decoded payload: a list of raw article records."""
        pass
