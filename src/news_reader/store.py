from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from .datamodels import Article
from .exceptions import LoadError
from .sources.base import Source

logger = logging.getLogger("news")


class ArticleStore:
    """Holds the article collection loaded from a Source.

    The collection is replaced wholesale by a successful ``load()`` and left
    untouched by a failed one.
    """

    def __init__(self, source: Source):
        self.source = source
        self._articles: Tuple[Article, ...] = ()
        self._index: Dict[str, Article] = {}
        self._loaded = False

    @property
    def articles(self) -> Tuple[Article, ...]:
        return self._articles

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    async def load(self) -> Tuple[Article, ...]:
        logger.info("Loading articles from %s", type(self.source).__name__)
        try:
            payload = await self.source.fetch_records()
            articles = _parse_payload(payload)
        except LoadError as e:
            logger.error("Failed to load articles: %s", e)
            raise
        except (OSError, ValueError, RecursionError) as e:
            logger.error("Failed to load articles: %s", e)
            raise LoadError(f"source unavailable or unreadable: {e}") from e

        # stable: equal timestamps keep source order
        articles.sort(key=lambda a: a.published_at, reverse=True)
        self._articles, self._index = tuple(articles), {a.id: a for a in articles}
        self._loaded = True
        logger.info("Loaded %d articles", len(self._articles))
        return self._articles

    def get_by_id(self, article_id: str) -> Optional[Article]:
        return self._index.get(article_id)

    def categories(self) -> List[str]:
        return sorted({a.category for a in self._articles})


def _parse_payload(payload: Any) -> List[Article]:
    if not isinstance(payload, list):
        raise LoadError(
            f"expected a list of records, got {type(payload).__name__}"
        )

    articles: List[Article] = []
    seen: set[str] = set()
    for position, record in enumerate(payload):
        try:
            article = Article.from_record(record)
        except ValueError as e:
            raise LoadError(f"record {position}: {e}") from e
        if article.id in seen:
            raise LoadError(
                f"record {position}: duplicate id {article.id!r}"
            )
        seen.add(article.id)
        articles.append(article)
    return articles
