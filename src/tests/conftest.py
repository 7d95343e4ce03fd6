from __future__ import annotations

from typing import Any, Dict, List

import pytest

from news_reader.query import QueryEngine
from news_reader.sources.base import Source
from news_reader.store import ArticleStore


def make_record(
    article_id: str,
    published_at: str = "2024-01-01T00:00:00Z",
    category: str = "Tech",
    **overrides: Any,
) -> Dict[str, Any]:
    record = {
        "id": article_id,
        "title": f"Title {article_id}",
        "summary": f"Summary {article_id}",
        "content": f"Content {article_id}",
        "author": "Reporter",
        "publishedAt": published_at,
        "imageUrl": f"https://img.example.com/{article_id}.jpg",
        "category": category,
    }
    record.update(overrides)
    return record


class StaticSource(Source):
    """Returns whatever payload is assigned; raises ``error`` if set."""

    def __init__(self, payload: Any = None):
        super().__init__({})
        self.payload = payload if payload is not None else []
        self.error: Exception | None = None
        self.calls = 0

    async def fetch_records(self) -> Any:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def records() -> List[Dict[str, Any]]:
    return [
        make_record("t1", "2024-03-01T09:00:00Z", "Tech", content="The budget for chips grew."),
        make_record("s1", "2024-02-20T09:00:00Z", "Sports"),
        make_record("t2", "2024-02-10T09:00:00Z", "Tech"),
        make_record("s2", "2024-01-05T09:00:00Z", "Sports", title="Derby Day"),
    ]


@pytest.fixture
def source(records) -> StaticSource:
    return StaticSource(records)


@pytest.fixture
def store(source) -> ArticleStore:
    return ArticleStore(source)


@pytest.fixture
def engine() -> QueryEngine:
    return QueryEngine()
