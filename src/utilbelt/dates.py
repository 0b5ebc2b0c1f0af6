"""Calendar-day comparisons."""
from __future__ import annotations

from datetime import date, datetime
from typing import Union

DateLike = Union[date, datetime]


def _calendar_day(value: DateLike) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def days_between(first: DateLike, second: DateLike) -> int:
    """Number of whole calendar days separating two moments.

    Times of day are ignored, so 23:59 and 00:01 the next morning are one
    day apart. The result is never negative.
    """

    return abs((_calendar_day(second) - _calendar_day(first)).days)


def is_same_day(first: DateLike, second: DateLike) -> bool:
    return _calendar_day(first) == _calendar_day(second)


__all__ = ["DateLike", "days_between", "is_same_day"]
