"""
news_reader

A terminal news reader: articles are loaded once from a JSON file, shown
newest first, filtered by category or searched by text, and opened in a
detail view.

The core can be used without the UI:

    store = ArticleStore(LocalJSONSource({}))
    feed = NewsFeed(store, QueryEngine())
    await feed.load_news()
    feed.search("budget")
    print([a.title for a in feed.visible])
"""
from .datamodels import Article
from .exceptions import LoadError, RecordError
from .feed import FeedEvent, NewsFeed
from .query import ALL_CATEGORIES, QueryEngine, QueryState
from .sources import LocalJSONSource, Source
from .store import ArticleStore

__all__ = [
    "ALL_CATEGORIES",
    "Article",
    "ArticleStore",
    "FeedEvent",
    "LoadError",
    "LocalJSONSource",
    "NewsFeed",
    "QueryEngine",
    "QueryState",
    "RecordError",
    "Source",
]
