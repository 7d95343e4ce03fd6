from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from news_reader.formatting import long_date, time_ago

NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "age, expected",
    [
        (timedelta(days=3, hours=4), "3d ago"),
        (timedelta(hours=5, minutes=59), "5h ago"),
        (timedelta(minutes=12), "12m ago"),
        (timedelta(seconds=30), "just now"),
        (timedelta(seconds=-30), "just now"),
    ],
)
def test_time_ago(age, expected):
    assert time_ago(NOW - age, now=NOW) == expected


def test_long_date():
    assert long_date(datetime(2024, 3, 1, tzinfo=timezone.utc)) == "1 March 2024"
    assert long_date(datetime(2023, 12, 31)) == "31 December 2023"
