import time
import pytest
from datetime import datetime, timedelta, timezone

from kinesis_metrics.utils.time_periods import (
    QueryWindow,
    compute_window,
    parse_timestamp,
    universal_now,
)


def test_compute_window_numeric():
    start, end = compute_window(1000, 60, 60)
    assert start == 880
    assert end == 940


def test_compute_window_not_validated():
    start, end = compute_window(1000, 0, 0)
    assert start == 1000
    assert end == 1000

    start, end = compute_window(1000, -60, 30)
    assert end == 1060
    assert start == 1030


def test_query_window():
    end = datetime(year=2024, month=5, day=1, hour=12, tzinfo=timezone.utc)
    window = QueryWindow.from_seconds(end, 60, 300)
    assert window.end == datetime(
        year=2024, month=5, day=1, hour=11, minute=59, tzinfo=timezone.utc
    )
    assert window.start == datetime(
        year=2024, month=5, day=1, hour=11, minute=54, tzinfo=timezone.utc
    )
    assert window.start < window.end
    assert window.period == timedelta(minutes=5)
    assert window.period_seconds == 300


def test_query_window_epoch_seconds():
    end = datetime.fromtimestamp(1000, tz=timezone.utc)
    window = QueryWindow.from_seconds(end, 60, 60)
    assert window.start.timestamp() == 880
    assert window.end.timestamp() == 940


def test_parse_timestamp_naive_is_utc():
    ts = parse_timestamp("2024-05-01 12:30")
    assert ts == datetime(
        year=2024, month=5, day=1, hour=12, minute=30, tzinfo=timezone.utc
    )


def test_parse_timestamp_with_offset():
    ts = parse_timestamp("2024-05-01T12:30:00+02:00")
    assert ts == datetime(
        year=2024, month=5, day=1, hour=10, minute=30, tzinfo=timezone.utc
    )

    ts_z = parse_timestamp("2024-05-01T12:30:00Z")
    assert ts_z == datetime(
        year=2024, month=5, day=1, hour=12, minute=30, tzinfo=timezone.utc
    )


def test_parse_timestamp_invalid():
    with pytest.raises(ValueError):
        parse_timestamp("not a timestamp")


@pytest.fixture
def new_york_clock(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("Requires time.tzset().")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


# pylint: disable-next=redefined-outer-name,unused-argument
def test_parse_now_is_utc_on_non_utc_host(new_york_clock):
    ts = parse_timestamp("now")
    assert ts.utcoffset() == timedelta(0)
    assert abs(datetime.now(timezone.utc) - ts) < timedelta(seconds=60)

    ts_upper = parse_timestamp(" NOW ")
    assert abs(datetime.now(timezone.utc) - ts_upper) < timedelta(seconds=60)


# pylint: disable-next=redefined-outer-name,unused-argument
def test_parse_relative_days_rejected(new_york_clock):
    for candidate in ["today", "Yesterday", "tomorrow"]:
        with pytest.raises(ValueError):
            parse_timestamp(candidate)


def test_universal_now_is_aware():
    now = universal_now()
    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)
