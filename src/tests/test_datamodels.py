from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from conftest import make_record
from news_reader.datamodels import Article, parse_timestamp
from news_reader.exceptions import RecordError


def test_from_record_parses_all_fields():
    article = Article.from_record(make_record("a1", "2024-03-01T10:30:00Z", "Tech"))
    assert article.id == "a1"
    assert article.title == "Title a1"
    assert article.author == "Reporter"
    assert article.category == "Tech"
    assert article.image_url == "https://img.example.com/a1.jpg"
    assert article.published_at == datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc)


def test_naive_timestamp_is_treated_as_utc():
    assert parse_timestamp("2024-03-01T10:30:00") == datetime(
        2024, 3, 1, 10, 30, tzinfo=timezone.utc
    )


def test_offset_timestamp_is_kept():
    parsed = parse_timestamp("2024-03-01T10:30:00+07:00")
    assert parsed.utcoffset() == timedelta(hours=7)


@pytest.mark.parametrize("missing", ["id", "title", "summary", "content", "author", "publishedAt", "category"])
def test_missing_required_field_raises(missing):
    record = make_record("a1")
    del record[missing]
    with pytest.raises(RecordError) as excinfo:
        Article.from_record(record)
    assert excinfo.value.field == missing


def test_non_string_field_raises():
    with pytest.raises(RecordError, match="title"):
        Article.from_record(make_record("a1", title=42))


def test_malformed_timestamp_raises():
    with pytest.raises(RecordError) as excinfo:
        Article.from_record(make_record("a1", "yesterday"))
    assert excinfo.value.field == "publishedAt"


def test_image_url_may_be_absent():
    record = make_record("a1")
    del record["imageUrl"]
    assert Article.from_record(record).image_url is None
    assert Article.from_record(make_record("a2", imageUrl=None)).image_url is None


def test_record_must_be_an_object():
    with pytest.raises(RecordError):
        Article.from_record(["not", "a", "record"])


def test_equality_uses_identifier_only():
    a = Article.from_record(make_record("same", title="One"))
    b = Article.from_record(make_record("same", title="Two"))
    c = Article.from_record(make_record("other", title="One"))
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_round_trip_preserves_every_field():
    original = Article.from_record(
        make_record("rt", "2024-02-29T23:59:59+05:30", "Économie", title="Ünïcode ✓")
    )
    restored = Article.from_record(original.to_record())
    assert restored == original
    assert restored.to_record() == original.to_record()
    assert restored.published_at == original.published_at


def test_round_trip_without_image():
    original = Article.from_record(make_record("rt", imageUrl=None))
    assert Article.from_record(original.to_record()).image_url is None


def test_article_is_immutable():
    article = Article.from_record(make_record("a1"))
    with pytest.raises(AttributeError):
        article.title = "changed"


def test_reading_minutes():
    short = Article.from_record(make_record("a1", content="few words"))
    long = Article.from_record(make_record("a2", content="word " * 1000))
    assert short.reading_minutes == 1
    assert long.reading_minutes == 5
