# interim/timeparse.py
from __future__ import annotations
from datetime import datetime, tzinfo
from typing import Optional

from .backend import DEFAULT_BACKEND, DateTimeBackend
from .errors import MissingDate, UnexpectedAbsoluteDate, UnexpectedDate, UnexpectedTime
from .model import Absolute, Dialect, FromName, Interval, Relative
from .parser import DateParser
from .resolve import resolve


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    if tz is not None:
        return datetime.now(tz)
    return datetime.now().astimezone()


def parse_dt(s: str, tz: Optional[tzinfo] = None) -> datetime:
    """Reference time from ISO text ('YYYY-MM-DD HH:MM' allowed) or 'now'; naive input gets `tz` or the local zone."""
    s = s.strip()
    if s.lower() == "now":
        return now_local(tz)
    # allow "YYYY-MM-DD HH:MM"
    if " " in s and "T" not in s:
        s = s.replace(" ", "T")
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz or now_local().tzinfo)
    return dt


def parse_date_string(text: str, now, dialect: Dialect = Dialect.UK, *,
                      backend: DateTimeBackend = DEFAULT_BACKEND):
    """
    Parse `text` into a date-time, relative to `now` (which also fixes the
    timezone of the result).

    >>> from datetime import datetime, timezone
    >>> now = datetime(2022, 9, 17, 13, 27, tzinfo=timezone.utc)
    >>> parse_date_string("friday 8pm", now).isoformat()
    '2022-09-23T20:00:00+00:00'
    """
    spec = DateParser(text).parse(dialect)
    return resolve(spec, now, dialect, backend)


def parse_duration(text: str) -> Interval:
    """
    Parse only a relative span: '15m ago', '3 weeks', '-2d'.

    >>> parse_duration("1 week ago")
    Days(value=-7)
    """
    spec = DateParser(text).parse(Dialect.UK)
    if spec.time is not None:
        raise UnexpectedTime()
    date = spec.date
    if isinstance(date, Relative):
        return date.interval
    if isinstance(date, Absolute):
        raise UnexpectedAbsoluteDate()
    if isinstance(date, FromName):
        raise UnexpectedDate()
    raise MissingDate()
