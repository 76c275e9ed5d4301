# interim/resolve.py
"""
Combine a parsed DateTimeSpec with a reference date-time.

Everything here goes through a DateTimeBackend, so the same rules apply to
whatever date-time type the caller passed as `now`.
"""
from __future__ import annotations
import logging
from typing import Any, Optional

from .backend import DEFAULT_BACKEND, DateTimeBackend
from .errors import MissingDate, MissingTime
from .model import (
    MIDNIGHT, Absolute, DateSpec, DateTimeSpec, DayMonth, Days, Dialect, Direction,
    FromName, Months, MonthName, Relative, Seconds, TimeSpec, WeekDay,
)

logger = logging.getLogger(__name__)

# what a backend raises for dates/times it cannot represent
CALENDAR_ERRORS = (ValueError, OverflowError)


def next_last_direction(value: Any, base: Any, direction: Direction) -> Optional[int]:
    """-1 / +1 when `value` sits on the wrong side of `base` for `direction`."""
    if direction is Direction.LAST and value > base:
        return -1
    if direction is Direction.NEXT and value < base:
        return 1
    return None


def time_on(ts: TimeSpec, tz: Any, date: Any, backend: DateTimeBackend = DEFAULT_BACKEND):
    """Build a date-time from a parsed time-of-day on `date` in zone `tz`."""
    extra_days, hour = divmod(ts.hour, 24)
    if extra_days:
        date = backend.offset_days(date, extra_days)
    t = backend.time(hour, ts.minute, ts.second)
    if ts.microsecond:
        t = backend.with_micros(t, ts.microsecond)
    dt = backend.combine(tz, date, t)
    if ts.offset is not None:
        # the explicit offset wins over the zone of `now`
        dt = backend.with_offset(dt, ts.offset)
    return dt


def _weekday(index: int, now, ts: TimeSpec, dialect: Dialect, direction: Direction, backend: DateTimeBackend):
    tz, base, base_time = backend.split(now)
    # a plain 'Friday' means the coming Friday. An explicit 'next Friday' is
    # Friday of next week in the UK, and the coming Friday in the US
    extra_week = False
    if direction is Direction.HERE:
        direction = Direction.NEXT
    elif direction is Direction.NEXT and dialect is Dialect.UK:
        extra_week = True

    diff = index - backend.weekday(base)
    date = backend.offset_days(base, diff)
    correct = next_last_direction(date, base, direction)
    if correct:
        date = backend.offset_days(date, 7 * correct)
    if extra_week:
        date = backend.offset_days(date, 7)
    if diff == 0:
        # same weekday as today: the time of day decides
        this_time = backend.time(ts.hour % 24, ts.minute, ts.second)
        correct = next_last_direction(this_time, base_time, direction)
        if correct:
            date = backend.offset_days(date, 7 * correct)
    return time_on(ts, tz, date, backend)


def _by_name(spec: FromName, now, ts: Optional[TimeSpec], dialect: Dialect, backend: DateTimeBackend):
    ts = ts or MIDNIGHT
    name, direction = spec.name, spec.direction
    if isinstance(name, WeekDay):
        return _weekday(name.index, now, ts, dialect, direction, backend)

    tz, base, _ = backend.split(now)
    this_year = backend.year(base)
    if isinstance(name, MonthName):
        month, day = name.month, 1
    elif isinstance(name, DayMonth):
        month, day = name.month, name.day
    else:
        raise TypeError(f"unknown named date {name!r}")
    date = backend.date(this_year, month, day)
    correct = next_last_direction(date, base, direction)
    if correct:
        date = backend.date(this_year + correct, month, day)
    return time_on(ts, tz, date, backend)


def _relative(spec: Relative, now, ts: Optional[TimeSpec], backend: DateTimeBackend):
    interval = spec.interval
    if isinstance(interval, Seconds):
        # seconds and time-of-day are fused; a parsed time does not apply
        return backend.offset_seconds(now, interval.value)
    tz, date, t = backend.split(now)
    if isinstance(interval, Days):
        date = backend.offset_days(date, interval.value)
        if ts is None:
            return backend.combine(tz, date, t)
        return time_on(ts, tz, date, backend)
    if isinstance(interval, Months):
        date = backend.offset_months(date, interval.value)
        return time_on(ts or MIDNIGHT, tz, date, backend)
    raise TypeError(f"unknown interval {interval!r}")


def resolve_date(spec: DateSpec, now, ts: Optional[TimeSpec], dialect: Dialect,
                 backend: DateTimeBackend = DEFAULT_BACKEND):
    if isinstance(spec, Absolute):
        tz, _, _ = backend.split(now)
        d = spec.date
        return time_on(ts or MIDNIGHT, tz, backend.date(d.year, d.month, d.day), backend)
    if isinstance(spec, Relative):
        return _relative(spec, now, ts, backend)
    if isinstance(spec, FromName):
        return _by_name(spec, now, ts, dialect, backend)
    raise TypeError(f"unknown date spec {spec!r}")


def resolve(spec: DateTimeSpec, now, dialect: Dialect = Dialect.UK,
            backend: DateTimeBackend = DEFAULT_BACKEND):
    """
    Turn `spec` into a date-time relative to `now`.

    Raises MissingDate when a date part cannot be placed on the calendar
    (e.g. 30 February) and MissingTime when there is nothing to resolve or a
    bare time cannot be built.
    """
    if spec.date is not None:
        try:
            result = resolve_date(spec.date, now, spec.time, dialect, backend)
        except CALENDAR_ERRORS as e:
            logger.debug("calendar rejected %r: %s", spec, e)
            raise MissingDate() from e
    elif spec.time is not None:
        # no date: today's date from `now`, in now's zone
        try:
            tz, date, _ = backend.split(now)
            result = time_on(spec.time, tz, date, backend)
        except CALENDAR_ERRORS as e:
            logger.debug("calendar rejected %r: %s", spec, e)
            raise MissingTime() from e
    else:
        raise MissingTime()
    logger.debug("resolved %r against %s -> %s", spec, now, result)
    return result
