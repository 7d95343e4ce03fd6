from __future__ import annotations

from typing import Any, Dict, Type

from .base import Source
from .local import LocalJSONSource

SOURCES: Dict[str, Type[Source]] = {"local": LocalJSONSource}


def get_source(config: Dict[str, Any]) -> Source:
    source_name = config.get("source", "local")
    source_config = config.get("sources", {}).get(source_name, {})
    source_class = SOURCES.get(source_name)
    if not source_class:
        raise ValueError(f"Unknown source: {source_name}")
    return source_class(source_config)


__all__ = ["Source", "LocalJSONSource", "SOURCES", "get_source"]
