# interim/vocab.py
from __future__ import annotations
from typing import Optional

from .model import Days, Interval, Months, Seconds

# Monday=0, same as datetime.date.weekday()
WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
MONTHS = ("january", "february", "march", "april", "may", "june",
          "july", "august", "september", "october", "november", "december")

_WEEKDAY_BY_PREFIX = {name[:3]: i for i, name in enumerate(WEEKDAYS)}
_MONTH_BY_PREFIX = {name[:3]: i + 1 for i, name in enumerate(MONTHS)}

_UNIT_LETTERS = {
    "s": Seconds(1),
    "m": Seconds(60),       # never months
    "h": Seconds(3600),
    "d": Days(1),
    "w": Days(7),
    "y": Months(12),
}

_UNIT_ABBREVIATIONS = {
    "hr": Seconds(3600),
    "wk": Days(7),
    "mo": Months(1),
    "yr": Months(12),
}

_UNIT_PREFIXES = {
    "sec": Seconds(1),
    "min": Seconds(60),
    "hou": Seconds(3600),
    "hrs": Seconds(3600),
    "day": Days(1),
    "wee": Days(7),
    "wks": Days(7),
    "yea": Months(12),
    "yrs": Months(12),
}

_MONTH_UNIT_WORDS = ("mo", "mos", "mon", "mons")


def week_day(word: str) -> Optional[int]:
    """'fri', 'Tues', 'thursdays' -> 0..6; 'month' is not Monday."""
    w = word.lower()
    if w.startswith("month"):
        return None
    return _WEEKDAY_BY_PREFIX.get(w[:3])


def month_name(word: str) -> Optional[int]:
    return _MONTH_BY_PREFIX.get(word.lower()[:3])


def time_unit(word: str) -> Optional[Interval]:
    """
    Unit template of magnitude 1: '3h', '5 min', '2 weeks', '6 months'.
    A bare 'm' is minutes; months need at least 'mo'.
    """
    w = word.lower()
    if len(w) == 1:
        return _UNIT_LETTERS.get(w)
    if len(w) == 2:
        return _UNIT_ABBREVIATIONS.get(w)
    # 'mon' is shared with Monday and 'mo' with 'morning'
    if w in _MONTH_UNIT_WORDS or w.startswith("month"):
        return Months(1)
    return _UNIT_PREFIXES.get(w[:3])
