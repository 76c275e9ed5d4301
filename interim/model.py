# interim/model.py
"""
Value types produced by the parser and consumed by the resolver.

DateSpec  = Absolute | Relative | FromName
ByName    = WeekDay | MonthName | DayMonth
Interval  = Seconds | Days | Months
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import timedelta
from enum import Enum
from typing import Optional, Union


class Dialect(Enum):
    UK = "uk"
    US = "us"


class Direction(Enum):
    NEXT = "next"
    LAST = "last"
    HERE = "here"   # no explicit next/last


# ---------- intervals ----------

@dataclass(frozen=True)
class Interval:
    """
    A signed span in one unit. Days are not a fixed number of seconds and
    months are not a fixed number of days, so units never mix.
    """
    value: int

    unit = "interval"

    def __mul__(self, n: int) -> "Interval":
        if not isinstance(n, int):
            return NotImplemented
        return type(self)(self.value * n)

    __rmul__ = __mul__

    def __neg__(self) -> "Interval":
        return self * -1

    def to_timedelta(self) -> timedelta:
        raise TypeError(f"{self.unit} have no fixed length")


@dataclass(frozen=True)
class Seconds(Interval):
    unit = "seconds"

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.value)


@dataclass(frozen=True)
class Days(Interval):
    unit = "days"

    def to_timedelta(self) -> timedelta:
        return timedelta(days=self.value)


@dataclass(frozen=True)
class Months(Interval):
    unit = "months"


# ---------- named dates ----------

@dataclass(frozen=True)
class WeekDay:
    index: int          # Monday=0


@dataclass(frozen=True)
class MonthName:
    month: int


@dataclass(frozen=True)
class DayMonth:
    day: int
    month: int


ByName = Union[WeekDay, MonthName, DayMonth]


@dataclass(frozen=True)
class AbsDate:
    year: int
    month: int
    day: int


# ---------- date specs ----------

@dataclass(frozen=True)
class Absolute:
    date: AbsDate


@dataclass(frozen=True)
class Relative:
    interval: Interval


@dataclass(frozen=True)
class FromName:
    name: ByName
    direction: Direction = Direction.HERE


DateSpec = Union[Absolute, Relative, FromName]


@dataclass(frozen=True)
class TimeSpec:
    hour: int
    minute: int = 0
    second: int = 0
    microsecond: int = 0
    offset: Optional[int] = None    # seconds east of UTC

    def with_offset(self, offset: int) -> "TimeSpec":
        return replace(self, offset=offset)


MIDNIGHT = TimeSpec(0)


@dataclass(frozen=True)
class DateTimeSpec:
    date: Optional[DateSpec] = None
    time: Optional[TimeSpec] = None
