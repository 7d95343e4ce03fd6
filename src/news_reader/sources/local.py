from __future__ import annotations

import asyncio
import importlib.resources
import json
import logging
from pathlib import Path
from typing import Any, Dict

from .base import Source

logger = logging.getLogger("news")

BUNDLED_DATA_PACKAGE = "news_reader.data"
BUNDLED_DATA_FILE = "news_data.json"


class LocalJSONSource(Source):
    """Reads the whole article list from a JSON file on every fetch.

    ``path`` selects a file on disk; without it the bundled data file is used.
    ``latency`` (seconds) simulates a network round trip before reading.
    """

    def __init__(self, config: Dict[str, Any]):
        super().__init__(config)
        path = self.config.get("path")
        self.path = Path(path).expanduser() if path else None
        self.latency = float(self.config.get("latency", 0) or 0)

    @property
    def location(self) -> str:
        if self.path is not None:
            return str(self.path)
        return f"{BUNDLED_DATA_PACKAGE}/{BUNDLED_DATA_FILE}"

    def _read_text(self) -> str:
        if self.path is not None:
            return self.path.read_text(encoding="utf-8")
        resource = importlib.resources.files(BUNDLED_DATA_PACKAGE) / BUNDLED_DATA_FILE
        return resource.read_text(encoding="utf-8")

    async def fetch_records(self) -> Any:
        if self.latency > 0:
            logger.debug("Simulating %.2fs latency for %s", self.latency, self.location)
            await asyncio.sleep(self.latency)
        logger.debug("Reading articles from %s", self.location)
        text = await asyncio.to_thread(self._read_text)
        return json.loads(text)
