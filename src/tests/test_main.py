from __future__ import annotations

from unittest.mock import patch

import pytest

from news_reader.feed import NewsFeed
from news_reader.main import build_feed, main, parse_args
from news_reader.sources import LocalJSONSource


def test_parse_args():
    args = parse_args(["--theme", "newsprint", "--data", "news.json", "--latency", "0.8"])
    assert args.theme == "newsprint"
    assert args.data == "news.json"
    assert args.latency == 0.8
    assert not args.debug


def test_build_feed_wires_local_source():
    feed = build_feed({"source": "local", "sources": {"local": {"latency": 0}}})
    assert isinstance(feed, NewsFeed)
    assert isinstance(feed.store.source, LocalJSONSource)


def test_build_feed_unknown_source():
    with pytest.raises(ValueError):
        build_feed({"source": "satellite"})


def test_main_passes_overrides_to_app(tmp_path):
    with patch("news_reader.main.load_config", return_value={"source": "local", "sources": {}}), \
            patch("news_reader.main.NewsApp") as mock_app:
        main(["--data", str(tmp_path / "news.json"), "--theme", "newsprint"])

    kwargs = mock_app.call_args.kwargs
    assert kwargs["theme"] == "newsprint"
    assert kwargs["startup_error"] is None
    assert kwargs["feed"].store.source.path == tmp_path / "news.json"
    mock_app.return_value.run.assert_called_once()


def test_main_reports_unknown_source():
    with patch("news_reader.main.load_config", return_value={"source": "satellite"}), \
            patch("news_reader.main.NewsApp") as mock_app:
        main([])

    kwargs = mock_app.call_args.kwargs
    assert kwargs["feed"] is None
    assert "satellite" in kwargs["startup_error"]
