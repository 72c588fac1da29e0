# calgrid/util/days.py
from __future__ import annotations

import datetime as dt
from typing import Iterator

_ONE_DAY = dt.timedelta(days=1)


def parse_date_yyyy_mm_dd(s: str) -> dt.date:
    return dt.datetime.strptime(s, "%Y-%m-%d").date()


def iter_days(first: dt.date, last: dt.date) -> Iterator[dt.date]:
    """Yield every calendar day from `first` to `last` inclusive.

    Yields nothing when `last` precedes `first`. Stops at date.max instead of overflowing.
    """
    day = first
    while day <= last:
        yield day
        if day == dt.date.max:
            return
        day += _ONE_DAY
