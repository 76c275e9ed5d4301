# interim/backend.py
"""
Calendar capability the resolver is written against.

A backend supplies three value types (a date, a time-of-day and a zoned
date-time) plus the handful of operations below. Failures are reported the
way the underlying library reports them (ValueError / OverflowError); the
resolver turns those into MissingDate / MissingTime.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Any, Generic, Optional, Tuple, TypeVar

from dateutil.relativedelta import relativedelta

D = TypeVar("D")    # date
T = TypeVar("T")    # time-of-day
DT = TypeVar("DT")  # zoned date-time


class DateTimeBackend(ABC, Generic[D, T, DT]):
    # -- dates (must be ordered) --
    @abstractmethod
    def date(self, year: int, month: int, day: int) -> D: ...

    @abstractmethod
    def offset_months(self, d: D, months: int) -> D:
        """Same day-of-month if it exists, else the last day of the target month."""

    @abstractmethod
    def offset_days(self, d: D, days: int) -> D: ...

    @abstractmethod
    def year(self, d: D) -> int: ...

    @abstractmethod
    def weekday(self, d: D) -> int:
        """Monday=0 .. Sunday=6"""

    # -- times (must be ordered) --
    @abstractmethod
    def time(self, hour: int, minute: int, second: int) -> T: ...

    @abstractmethod
    def with_micros(self, t: T, micros: int) -> T: ...

    # -- date-times --
    @abstractmethod
    def combine(self, tz: Any, d: D, t: T) -> DT: ...

    @abstractmethod
    def split(self, dt: DT) -> Tuple[Any, D, T]: ...

    @abstractmethod
    def with_offset(self, dt: DT, offset: int) -> DT:
        """Reinterpret dt's wall-clock fields as being at UTC+offset seconds, keeping dt's zone."""

    @abstractmethod
    def offset_seconds(self, dt: DT, seconds: int) -> DT:
        """Shift by exactly `seconds` of elapsed time."""


class DatetimeBackend(DateTimeBackend[date, time, datetime]):
    """Standard library datetime, any tzinfo (timezone, ZoneInfo, dateutil.tz) or naive."""

    def date(self, year: int, month: int, day: int) -> date:
        return date(year, month, day)

    def offset_months(self, d: date, months: int) -> date:
        return d + relativedelta(months=months)

    def offset_days(self, d: date, days: int) -> date:
        return d + timedelta(days=days)

    def year(self, d: date) -> int:
        return d.year

    def weekday(self, d: date) -> int:
        return d.weekday()

    def time(self, hour: int, minute: int, second: int) -> time:
        return time(hour, minute, second)

    def with_micros(self, t: time, micros: int) -> time:
        return t.replace(microsecond=micros)

    def combine(self, tz: Optional[tzinfo], d: date, t: time) -> datetime:
        return datetime.combine(d, t, tzinfo=tz)

    def split(self, dt: datetime) -> Tuple[Optional[tzinfo], date, time]:
        return dt.tzinfo, dt.date(), dt.time()

    def with_offset(self, dt: datetime, offset: int) -> datetime:
        fixed = dt.replace(tzinfo=timezone(timedelta(seconds=offset)))
        if dt.tzinfo is None:
            # naive results stay naive, expressed in UTC
            return fixed.astimezone(timezone.utc).replace(tzinfo=None)
        return fixed.astimezone(dt.tzinfo)

    def offset_seconds(self, dt: datetime, seconds: int) -> datetime:
        delta = timedelta(seconds=seconds)
        if dt.tzinfo is None:
            return dt + delta
        # aware + timedelta is wall-clock arithmetic; go through UTC for elapsed time
        return (dt.astimezone(timezone.utc) + delta).astimezone(dt.tzinfo)


DEFAULT_BACKEND = DatetimeBackend()
