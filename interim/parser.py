# interim/parser.py
"""
Recursive-descent grammar: a date phrase followed by an optional time phrase.

Date phrases:
  [next|last|this] {weekday}           friday, next mon
  [next|last|this] {month} [{day}[, {year}]]
  {day} {month} [[,] {year}]           4 July, 30 June 2018
  [-]{n} {unit} [ago]                  3h, -3 month, 2 weeks ago
  [next|last|this] {unit}              last year, next week
  {year}-{month}-{day}                 2017-06-30
  [next|last] {a}/{b}[/{year}]         8/11, 30/06/17 (order depends on dialect)
  {year}                               2018
  now | today | yesterday | tomorrow

Time phrases:
  [T]hh:mm[:ss[.frac]][am|pm|Z|+hh:mm|+hhmm]
  hh.mm[am|pm]
  hh am|pm

When the date grammar has already eaten the hour of a time ('2d 03:00',
'12am', '7:26'), it hands it over as a PendingHour.
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import NamedTuple, Optional, Tuple

from .errors import DateError, MissingDate, UnexpectedEndOfText, UnexpectedToken
from .lexer import Kind, Lexer, Token
from .model import (
    AbsDate, Absolute, DateSpec, DateTimeSpec, DayMonth, Days, Dialect, Direction,
    FromName, Interval, MonthName, Relative, TimeSpec, WeekDay,
)
from .vocab import month_name, time_unit, week_day

logger = logging.getLogger(__name__)


class TimeKind(Enum):
    FORMAL = "formal"       # saw ':'
    INFORMAL = "informal"   # saw '.'
    AM = "am"
    PM = "pm"
    UNKNOWN = "unknown"     # bare number, separator still to come


class PendingHour(NamedTuple):
    hour: int
    kind: TimeKind
    span: Tuple[int, int]


_SHORTCUTS = {
    "now": Days(0),
    "today": Days(0),
    "yesterday": Days(-1),
    "tomorrow": Days(1),
}

_DIRECTIONS = {
    "next": Direction.NEXT,
    "last": Direction.LAST,
    "this": Direction.HERE,
}

_UNIT_SIGN = {Direction.LAST: -1, Direction.HERE: 0, Direction.NEXT: 1}

_NO_DATE_START = (Kind.COLON, Kind.COMMA, Kind.DASH, Kind.DOT, Kind.SLASH, Kind.PLUS)


def pivot_year(y: int) -> int:
    """Two-digit years pivot between 1941 and 2040."""
    if y <= 40:
        return 2000 + y
    if y <= 99:
        return 1900 + y
    return y


def meridiem(hour: int, word: str, span: Tuple[int, int]) -> int:
    if not 1 <= hour <= 12:
        raise UnexpectedToken("hour 1-12", span)
    if word == "am":
        return 0 if hour == 12 else hour
    return 12 if hour == 12 else hour + 12


class DateParser:
    def __init__(self, text: str):
        self.text = text
        self.lex = Lexer(text)

    # ---------- token helpers ----------

    def _unexpected(self, expected: str) -> UnexpectedToken:
        """Error at the token just consumed."""
        return UnexpectedToken(expected, self.lex.span)

    def _expect_number(self, expected: str = "number") -> Token:
        tok = self.lex.next()
        if tok is None:
            raise UnexpectedEndOfText(expected)
        if tok.kind is not Kind.NUMBER:
            raise self._unexpected(expected)
        return tok

    def _next_num(self, expected: str = "number") -> int:
        return self._expect_number(expected).value  # type: ignore[return-value]

    def _time_follows(self) -> bool:
        """Is the upcoming NUMBER the hour of a time rather than a day or year?"""
        save = self.lex.save()
        try:
            num = self.lex.next()
            if num is None or num.kind is not Kind.NUMBER:
                return False
            after = self.lex.next()
            return after is not None and (
                after.kind in (Kind.COLON, Kind.DOT) or after.is_word("am", "pm")
            )
        finally:
            self.lex.restore(save)

    # ---------- date phrase ----------

    def _iso_date(self, year: int) -> DateSpec:
        month = self._next_num("month")
        tok = self.lex.next()
        if tok is None:
            raise UnexpectedEndOfText("'-'")
        if tok.kind is not Kind.DASH:
            raise self._unexpected("'-'")
        day = self._next_num("day")
        return Absolute(AbsDate(year, month, day))

    def _informal_date(self, day_or_month: int, dialect: Dialect, direction: Direction) -> DateSpec:
        # US: mm/dd[/yy]   UK: dd/mm[/yy]
        month_or_day = self._next_num()
        if dialect is Dialect.US:
            day, month = month_or_day, day_or_month
        else:
            day, month = day_or_month, month_or_day
        nxt = self.lex.peek()
        if nxt is None or nxt.kind is not Kind.SLASH:
            return FromName(DayMonth(day, month), direction)
        self.lex.next()
        year = pivot_year(self._next_num("year"))
        return Absolute(AbsDate(year, month, day))

    def _month_first(self, month: int, direction: Direction) -> DateSpec:
        # {month} [{day}[, {year}]]
        nxt = self.lex.peek()
        if nxt is None or nxt.kind is not Kind.NUMBER or self._time_follows():
            return FromName(MonthName(month), direction)
        day = self._next_num()
        save = self.lex.save()
        comma = self.lex.next()
        if comma is not None and comma.kind is Kind.COMMA:
            year = self._next_num("year")
            return Absolute(AbsDate(year, month, day))
        # maybe a time follows; leave it for the time phrase
        self.lex.restore(save)
        return FromName(DayMonth(day, month), direction)

    def _day_first(self, day: int, month: int, direction: Direction) -> DateSpec:
        # {day} {month} [[,] {year}]
        save = self.lex.save()
        tok = self.lex.next()
        if tok is not None and tok.kind is Kind.COMMA:
            if not self._time_follows():
                return Absolute(AbsDate(self._next_num("year"), month, day))
        elif tok is not None and tok.kind is Kind.NUMBER:
            self.lex.restore(save)
            if not self._time_follows():
                return Absolute(AbsDate(self._next_num("year"), month, day))
        self.lex.restore(save)
        return FromName(DayMonth(day, month), direction)

    def _counted_unit(self, n: int, unit: Interval, sign: bool) -> Tuple[DateSpec, Optional[PendingHour]]:
        # '2 days', '3 hours ago', '-3h', '2d 03:00'
        if sign:
            return Relative(unit * -n), None
        nxt = self.lex.peek()
        if nxt is not None and nxt.kind is Kind.IDENT:
            self.lex.next()
            if nxt.is_word("ago"):
                return Relative(unit * -n), None
            raise self._unexpected("'ago'")
        if nxt is not None and nxt.kind is Kind.NUMBER:
            self.lex.next()
            return Relative(unit * n), PendingHour(nxt.value, TimeKind.UNKNOWN, nxt.span)
        return Relative(unit * n), None

    def _leading_word(self, tok: Token, direction: Direction) -> DateSpec:
        word = tok.text
        month = month_name(word)
        if month is not None:
            return self._month_first(month, direction)
        day = week_day(word)
        if day is not None:
            return FromName(WeekDay(day), direction)
        unit = time_unit(word)
        if unit is not None:
            # 'last year', 'this month', 'next week'
            return Relative(unit * _UNIT_SIGN[direction])
        raise self._unexpected("unsupported identifier")

    def _leading_number(
        self, num: Token, sign: bool, direction: Optional[Direction], dialect: Dialect
    ) -> Tuple[Optional[DateSpec], Optional[PendingHour]]:
        n, span = num.value, num.span
        tok = self.lex.next()
        if tok is None:
            if sign:
                raise UnexpectedEndOfText("duration")
            if direction is not None:
                raise UnexpectedEndOfText("day or month name")
            # just a year
            return Absolute(AbsDate(n, 1, 1)), None

        if tok.kind in (Kind.COMMA, Kind.PLUS, Kind.NUMBER, Kind.ERROR):
            raise self._unexpected("date")

        if tok.kind is Kind.IDENT:
            word = tok.text.lower()
            month = month_name(word)
            unit = time_unit(word)
            if sign and unit is None:
                raise self._unexpected("time unit")
            if month is not None:
                return self._day_first(n, month, direction or Direction.HERE), None
            if unit is not None:
                return self._counted_unit(n, unit, sign)
            if word in ("am", "pm"):
                if direction is not None:
                    raise self._unexpected("day or month name")
                return None, PendingHour(n, TimeKind(word), span)
            raise self._unexpected("month or time unit")

        # punctuation after the number
        if sign:
            raise self._unexpected("time unit")
        if tok.kind is Kind.SLASH:
            return self._informal_date(n, dialect, direction or Direction.HERE), None
        if direction is not None:
            raise self._unexpected("day or month name")
        if tok.kind is Kind.COLON:
            return None, PendingHour(n, TimeKind.FORMAL, span)
        if tok.kind is Kind.DOT:
            return None, PendingHour(n, TimeKind.INFORMAL, span)
        # Kind.DASH
        return self._iso_date(n), None

    def parse_date(self, dialect: Dialect) -> Tuple[Optional[DateSpec], Optional[PendingHour]]:
        sign = False
        direction: Optional[Direction] = None
        tok = self.lex.next()
        if tok is not None and tok.kind is Kind.DASH:
            sign = True
            tok = self.lex.next()
        elif tok is not None and tok.kind is Kind.IDENT:
            word = tok.text.lower()
            if word in _SHORTCUTS:
                return Relative(_SHORTCUTS[word]), None
            direction = _DIRECTIONS.get(word)
            if direction is not None:
                tok = self.lex.next()

        if tok is None:
            raise UnexpectedEndOfText("empty date string")
        if tok.kind is Kind.ERROR:
            raise self._unexpected("date")
        if tok.kind in _NO_DATE_START:
            raise MissingDate()
        if tok.kind is Kind.IDENT:
            if sign:
                # '-June' means nothing
                raise self._unexpected("number")
            return self._leading_word(tok, direction or Direction.HERE), None
        return self._leading_number(tok, sign, direction, dialect)

    # ---------- time phrase ----------

    def _fraction(self) -> int:
        # microsecond precision: keep the 6 most significant digits
        tok = self._expect_number("fraction of a second")
        return int(tok.text[:6].ljust(6, "0"))

    def _utc_offset(self, sign: int) -> int:
        # HH:MM or packed HHMM; one or two digits are whole hours
        tok = self._expect_number("offset")
        nxt = self.lex.peek()
        if nxt is not None and nxt.kind is Kind.COLON:
            self.lex.next()
            hours, minutes = tok.value, self._next_num("offset minutes")
        elif len(tok.text) <= 2:
            hours, minutes = tok.value, 0
        else:
            hours, minutes = divmod(tok.value, 100)
        return sign * 60 * (minutes + 60 * hours)

    def formal_time(self, hour: int) -> TimeSpec:
        minute = self._next_num("minute")
        second = micros = 0

        tok = self.lex.next()
        if tok is not None and tok.kind is Kind.COLON:
            second = self._next_num("second")
            tok = self.lex.next()
            if tok is not None and tok.kind is Kind.DOT:
                micros = self._fraction()
                tok = self.lex.next()
        elif tok is not None and tok.kind in (Kind.SLASH, Kind.DOT, Kind.COMMA, Kind.ERROR):
            raise self._unexpected("':'")

        ts = TimeSpec(hour, minute, second, micros)
        if tok is None:
            return ts
        if tok.kind in (Kind.PLUS, Kind.DASH):
            return ts.with_offset(self._utc_offset(-1 if tok.kind is Kind.DASH else 1))
        if tok.kind is Kind.IDENT:
            word = tok.text.lower()
            if word == "z":
                return ts.with_offset(0)
            if word in ("am", "pm"):
                return TimeSpec(meridiem(hour, word, tok.span), minute, second, micros)
            raise self._unexpected("Z/am/pm")
        raise self._unexpected("timezone")

    def informal_time(self, hour: int) -> TimeSpec:
        minute = self._next_num("minute")
        tok = self.lex.next()
        if tok is None:
            return TimeSpec(hour, minute)
        if tok.is_word("am", "pm"):
            return TimeSpec(meridiem(hour, tok.text.lower(), tok.span), minute)
        raise self._unexpected("am/pm")

    def _after_hour(self, hour: int, expected: str) -> TimeSpec:
        tok = self.lex.next()
        if tok is None:
            raise UnexpectedEndOfText(expected)
        if tok.kind is Kind.COLON:
            return self.formal_time(hour)
        if tok.kind is Kind.DOT:
            return self.informal_time(hour)
        if tok.is_word("am", "pm"):
            return TimeSpec(meridiem(hour, tok.text.lower(), tok.span))
        raise self._unexpected(expected)

    def parse_time(self, pending: Optional[PendingHour] = None) -> Optional[TimeSpec]:
        if pending is not None:
            hour, kind, span = pending
            if hour > 23:
                raise UnexpectedToken("hour", span)
            if kind is TimeKind.FORMAL:
                return self.formal_time(hour)
            if kind is TimeKind.INFORMAL:
                return self.informal_time(hour)
            if kind in (TimeKind.AM, TimeKind.PM):
                return TimeSpec(meridiem(hour, kind.value, span))
            return self._after_hour(hour, "':' or '.'")

        # optional ISO 'T' separator
        save = self.lex.save()
        tok = self.lex.next()
        separated = tok is not None and tok.is_word("t")
        if not separated:
            self.lex.restore(save)

        tok = self.lex.next()
        if tok is None:
            if separated:
                raise UnexpectedEndOfText("hour")
            return None
        if tok.kind is not Kind.NUMBER:
            raise self._unexpected("number")
        if tok.value > 23:
            raise self._unexpected("hour")
        return self._after_hour(tok.value, "am/pm, ':' or '.'")

    # ---------- entry ----------

    def parse(self, dialect: Dialect = Dialect.UK) -> DateTimeSpec:
        try:
            date, pending = self.parse_date(dialect)
            time = self.parse_time(pending)
            if not self.lex.at_end:
                self.lex.next()
                raise self._unexpected("end of input")
        except DateError as e:
            logger.debug("parse of %r failed: %r", self.text, e)
            raise
        spec = DateTimeSpec(date, time)
        logger.debug("parsed %r -> %r", self.text, spec)
        return spec
