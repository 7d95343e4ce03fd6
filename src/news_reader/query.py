from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .datamodels import Article

ALL_CATEGORIES = "All"


@dataclass(frozen=True)
class QueryState:
    category: str = ALL_CATEGORIES
    search_text: str = ""


class QueryEngine:
    """Derives the visible article list from a category and a search string.

    A non-blank search overrides the category: matching is done across all
    articles regardless of the selected category. Input order is preserved.
    """

    def query(
        self, articles: Iterable[Article], category: str, search_text: str
    ) -> List[Article]:
        needle = search_text.strip().casefold()
        if needle:
            return [a for a in articles if _matches(a, needle)]
        if category == ALL_CATEGORIES:
            return list(articles)
        return [a for a in articles if a.category == category]

    def apply(self, articles: Iterable[Article], state: QueryState) -> List[Article]:
        return self.query(articles, state.category, state.search_text)


def _matches(article: Article, needle: str) -> bool:
    return (
        needle in article.title.casefold()
        or needle in article.summary.casefold()
        or needle in article.content.casefold()
    )
