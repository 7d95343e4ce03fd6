from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Callable, List, Optional

from .datamodels import Article
from .exceptions import LoadError
from .query import ALL_CATEGORIES, QueryEngine, QueryState
from .store import ArticleStore

logger = logging.getLogger("news")


class FeedEvent(Enum):
    LOADING_STARTED = "loading-started"
    LOAD_SUCCEEDED = "load-succeeded"
    LOAD_FAILED = "load-failed"
    QUERY_UPDATED = "query-updated"


FeedListener = Callable[[FeedEvent], None]


class NewsFeed:
    """Reader-facing state over an ArticleStore and a QueryEngine.

    Tracks loading and error state plus the current category/search selection,
    keeps ``visible`` in sync with them and notifies subscribers after every
    change. UI layers subscribe; the feed knows nothing about them.
    """

    def __init__(self, store: ArticleStore, engine: QueryEngine):
        self.store = store
        self.engine = engine
        self.state = QueryState()
        self.is_loading = False
        self.error_message: Optional[str] = None
        self.visible: List[Article] = []
        self._listeners: List[FeedListener] = []

    # --- Observers ---
    def subscribe(self, listener: FeedListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: FeedEvent) -> None:
        logger.debug("Feed event: %s", event.value)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Feed listener %r failed on %s", listener, event.value)

    # --- State ---
    @property
    def categories(self) -> List[str]:
        return [ALL_CATEGORIES, *self.store.categories()]

    @property
    def selected_category(self) -> str:
        return self.state.category

    @property
    def search_query(self) -> str:
        return self.state.search_text

    @property
    def has_error(self) -> bool:
        return self.error_message is not None

    @property
    def has_data(self) -> bool:
        return bool(self.store.articles)

    def _recompute(self) -> None:
        self.visible = self.engine.apply(self.store.articles, self.state)

    # --- Operations ---
    async def load_news(self) -> None:
        self.is_loading = True
        self.error_message = None
        self._emit(FeedEvent.LOADING_STARTED)
        try:
            await self.store.load()
        except LoadError as e:
            self.error_message = f"Failed to load news: {e}"
            event = FeedEvent.LOAD_FAILED
        else:
            self._recompute()
            event = FeedEvent.LOAD_SUCCEEDED
        finally:
            self.is_loading = False
        self._emit(event)

    async def refresh(self) -> None:
        await self.load_news()

    async def retry(self) -> None:
        await self.load_news()

    def filter_by_category(self, category: str) -> None:
        self.state = replace(self.state, category=category)
        self._recompute()
        self._emit(FeedEvent.QUERY_UPDATED)

    def search(self, text: str) -> None:
        self.state = replace(self.state, search_text=text.strip())
        self._recompute()
        self._emit(FeedEvent.QUERY_UPDATED)

    def clear_search(self) -> None:
        self.search("")

    def get_article(self, article_id: str) -> Optional[Article]:
        return self.store.get_by_id(article_id)
