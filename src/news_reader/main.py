#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .app import NewsApp
from .config import apply_overrides, load_config, setup_logging
from .feed import NewsFeed
from .query import QueryEngine
from .sources import get_source
from .store import ArticleStore

logger = logging.getLogger("news")


def build_feed(config: dict) -> NewsFeed:
    """Wire the source, store and query engine once for the whole app."""
    source = get_source(config)
    store = ArticleStore(source)
    return NewsFeed(store, QueryEngine())


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="News Reader")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--theme", type=str, help="Set theme for this run")
    parser.add_argument(
        "--data", type=str, metavar="PATH", help="Read articles from this JSON file"
    )
    parser.add_argument(
        "--latency",
        type=float,
        metavar="SECONDS",
        help="Simulated delay before articles are read (default: 0)",
    )
    return parser.parse_args(argv)


# --- Entrypoint ---
def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    debug_path = setup_logging(args.debug)
    if debug_path:
        print(f"Debug logging enabled: {debug_path}", file=sys.stderr)

    config = apply_overrides(
        load_config(), theme=args.theme, data_path=args.data, latency=args.latency
    )
    logger.info("Using theme: %s", config.get("theme"))

    feed = None
    startup_error = None
    try:
        feed = build_feed(config)
    except ValueError as e:
        logger.error("Could not set up news source: %s", e)
        startup_error = str(e)

    try:
        app = NewsApp(
            feed=feed,
            theme=config.get("theme"),
            config=config,
            startup_error=startup_error,
        )
        app.run()
    except Exception as e:
        logger.exception("Application crashed: %s", e)
        print(f"Application crashed: {e}", file=sys.stderr)


if __name__ == "__main__":
    main()
