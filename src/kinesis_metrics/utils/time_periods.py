import pytz
import pandas as pd
from datetime import datetime, timedelta
from typing import Any, Tuple


def universal_now() -> datetime:
    return datetime.now(tz=pytz.UTC)


# pandas resolves these against the host's local clock.
_RELATIVE_TIMESTAMPS = ("today", "yesterday", "tomorrow")


def parse_timestamp(candidate: str) -> datetime:
    """
    Parses a free-form timestamp (e.g., "2024-05-01 12:30", ISO 8601 strings
    with or without an offset). Timestamps without a timezone are interpreted
    as UTC. "now" is the current UTC time.
    """
    keyword = candidate.strip().lower()
    if keyword == "now":
        return universal_now()
    if keyword in _RELATIVE_TIMESTAMPS:
        raise ValueError("Relative timestamp {} is not supported".format(candidate))

    ts = pd.Timestamp(candidate)
    if ts is pd.NaT:
        raise ValueError("Unrecognized timestamp {}".format(candidate))
    if ts.tzinfo is None:
        ts = ts.tz_localize(pytz.UTC)
    return ts.to_pydatetime()


def compute_window(end: Any, fetch_age: Any, period: Any) -> Tuple[Any, Any]:
    """
    Returns the `(start, end)` range to query, which ends `fetch_age` before
    `end` and spans one `period`.

    NOTE: The arguments are not validated. A negative `fetch_age` or `period`
    just shifts the window.
    """
    window_end = end - fetch_age
    window_start = window_end - period
    return window_start, window_end


class QueryWindow:
    def __init__(self, end: datetime, fetch_age: timedelta, period: timedelta) -> None:
        self._end = end
        self._fetch_age = fetch_age
        self._period = period
        self._query_start, self._query_end = compute_window(end, fetch_age, period)

    @classmethod
    def from_seconds(
        cls, end: datetime, fetch_age_s: int, period_s: int
    ) -> "QueryWindow":
        return cls(end, timedelta(seconds=fetch_age_s), timedelta(seconds=period_s))

    @property
    def start(self) -> datetime:
        return self._query_start

    @property
    def end(self) -> datetime:
        return self._query_end

    @property
    def period(self) -> timedelta:
        return self._period

    @property
    def period_seconds(self) -> int:
        return int(self._period.total_seconds())

    def __repr__(self) -> str:
        return "QueryWindow({} -- {}, period={}s)".format(
            self._query_start.isoformat(),
            self._query_end.isoformat(),
            self.period_seconds,
        )
