"""Grammar tests: text -> DateTimeSpec, no calendar involved."""

import pytest

from interim.errors import UnexpectedToken
from interim.model import (
    AbsDate, Absolute, DateTimeSpec, DayMonth, Days, Dialect, Direction, FromName,
    MonthName, Months, Relative, Seconds, TimeSpec, WeekDay,
)
from interim.parser import DateParser, PendingHour, TimeKind, meridiem, pivot_year

HERE, NEXT, LAST = Direction.HERE, Direction.NEXT, Direction.LAST


def parse(text, dialect=Dialect.UK):
    return DateParser(text).parse(dialect)


@pytest.mark.parametrize("text,expected", [
    ("friday", DateTimeSpec(FromName(WeekDay(4), HERE))),
    ("next mon", DateTimeSpec(FromName(WeekDay(0), NEXT))),
    ("last Fri 9.30", DateTimeSpec(FromName(WeekDay(4), LAST), TimeSpec(9, 30))),
    ("this thursday", DateTimeSpec(FromName(WeekDay(3), HERE))),
    ("mondays 9am", DateTimeSpec(FromName(WeekDay(0), HERE), TimeSpec(9))),
    ("next mondays", DateTimeSpec(FromName(WeekDay(0), NEXT))),
    ("jul", DateTimeSpec(FromName(MonthName(7), HERE))),
    ("April 1 8.30pm", DateTimeSpec(FromName(DayMonth(1, 4), HERE), TimeSpec(20, 30))),
    ("June 30, 2018", DateTimeSpec(Absolute(AbsDate(2018, 6, 30)))),
    ("30 June 2018", DateTimeSpec(Absolute(AbsDate(2018, 6, 30)))),
    ("30 June, 2018", DateTimeSpec(Absolute(AbsDate(2018, 6, 30)))),
    ("4 July", DateTimeSpec(FromName(DayMonth(4, 7), HERE))),
    ("4 July 10:30", DateTimeSpec(FromName(DayMonth(4, 7), HERE), TimeSpec(10, 30))),
    ("march 9am", DateTimeSpec(FromName(MonthName(3), HERE), TimeSpec(9))),
    ("2017-06-30", DateTimeSpec(Absolute(AbsDate(2017, 6, 30)))),
    ("2018", DateTimeSpec(Absolute(AbsDate(2018, 1, 1)))),
    ("3h", DateTimeSpec(Relative(Seconds(3 * 3600)))),
    ("-3 month", DateTimeSpec(Relative(Months(-3)))),
    ("2 weeks ago", DateTimeSpec(Relative(Days(-14)))),
    ("2d 03:00", DateTimeSpec(Relative(Days(2)), TimeSpec(3, 0))),
    ("last year", DateTimeSpec(Relative(Months(-12)))),
    ("this week", DateTimeSpec(Relative(Days(0)))),
    ("next month", DateTimeSpec(Relative(Months(1)))),
    ("tomorrow", DateTimeSpec(Relative(Days(1)))),
    ("today 3pm", DateTimeSpec(Relative(Days(0)), TimeSpec(15))),
    ("7:26 AM", DateTimeSpec(None, TimeSpec(7, 26))),
    ("12am", DateTimeSpec(None, TimeSpec(0))),
    ("12.15pm", DateTimeSpec(None, TimeSpec(12, 15))),
])
def test_date_time_specs(text, expected):
    assert parse(text) == expected


def test_slash_order_follows_dialect():
    assert parse("8/11", Dialect.US) == DateTimeSpec(FromName(DayMonth(11, 8), HERE))
    assert parse("8/11", Dialect.UK) == DateTimeSpec(FromName(DayMonth(8, 11), HERE))
    assert parse("last 8/11", Dialect.UK) == DateTimeSpec(FromName(DayMonth(8, 11), LAST))


@pytest.mark.parametrize("text,year", [
    ("1/1/00", 2000),
    ("1/1/40", 2040),
    ("1/1/41", 1941),
    ("1/1/99", 1999),
    ("1/1/100", 100),
    ("1/1/2017", 2017),
])
def test_slash_year_pivot(text, year):
    assert parse(text) == DateTimeSpec(Absolute(AbsDate(year, 1, 1)))


@pytest.mark.parametrize("text,time", [
    ("2017-06-30T08:20:30Z", TimeSpec(8, 20, 30, 0, 0)),
    ("2017-06-30 08:20:30 +04:00", TimeSpec(8, 20, 30, 0, 4 * 3600)),
    ("2017-06-30 08:20:30 +0400", TimeSpec(8, 20, 30, 0, 4 * 3600)),
    ("2017-06-30 08:20:30 +0530", TimeSpec(8, 20, 30, 0, 5 * 3600 + 30 * 60)),
    ("2017-06-30 08:20:30 -07:00", TimeSpec(8, 20, 30, 0, -7 * 3600)),
    ("2017-06-30 08:20:30.25", TimeSpec(8, 20, 30, 250000)),
    ("2017-06-30 08:20:30.000001", TimeSpec(8, 20, 30, 1)),
    ("2017-06-30 8:30pm", TimeSpec(20, 30)),
    ("2017-06-30 t08:20", TimeSpec(8, 20)),
])
def test_time_phrases(text, time):
    assert parse(text).time == time


def test_identifiers_are_case_insensitive():
    assert parse("NEXT FRIDAY 8PM") == DateTimeSpec(FromName(WeekDay(4), NEXT), TimeSpec(20))
    assert parse("3 Hours Ago") == DateTimeSpec(Relative(Seconds(-3 * 3600)))


def test_month_word_is_not_monday():
    assert parse("months").date == Relative(Months(0))


@pytest.mark.parametrize("text,expected,span", [
    ("bananas", "unsupported identifier", (0, 7)),
    ("3 bananas", "month or time unit", (2, 9)),
    ("3, 4", "date", (1, 2)),
    ("2017-06/30", "'-'", (7, 8)),
    ("-4 july", "time unit", (3, 7)),
    ("-3:00", "time unit", (2, 3)),
    ("next 9am", "day or month name", (6, 8)),
    ("next 10:30", "day or month name", (7, 8)),
    ("10:30/", "':'", (5, 6)),
    ("10:30:00 foo", "Z/am/pm", (9, 12)),
    ("10:30:00 5", "timezone", (9, 10)),
    ("8.30 tonight", "am/pm", (5, 12)),
    ("2d 3 hours", "':' or '.'", (5, 10)),
    ("99999999999 days", "date", (0, 11)),
])
def test_unexpected_tokens(text, expected, span):
    with pytest.raises(UnexpectedToken) as exc:
        parse(text)
    assert exc.value == UnexpectedToken(expected, span)


# ---------------------------------------------------------------------------
# Pieces
# ---------------------------------------------------------------------------

def test_date_phrase_hands_over_pending_hour():
    p = DateParser("2d 03:00")
    date, pending = p.parse_date(Dialect.UK)
    assert date == Relative(Days(2))
    assert pending == PendingHour(3, TimeKind.UNKNOWN, (3, 5))
    assert p.parse_time(pending) == TimeSpec(3, 0)


def test_time_phrase_absent():
    p = DateParser("friday")
    p.parse_date(Dialect.UK)
    assert p.parse_time() is None


@pytest.mark.parametrize("y,expected", [(0, 2000), (17, 2017), (40, 2040), (41, 1941), (99, 1999), (100, 100)])
def test_pivot_year(y, expected):
    assert pivot_year(y) == expected


@pytest.mark.parametrize("hour,word,expected", [
    (12, "am", 0), (1, "am", 1), (11, "am", 11),
    (12, "pm", 12), (1, "pm", 13), (11, "pm", 23),
])
def test_meridiem(hour, word, expected):
    assert meridiem(hour, word, (0, 0)) == expected


@pytest.mark.parametrize("hour", [0, 13])
def test_meridiem_rejects_out_of_range(hour):
    with pytest.raises(UnexpectedToken):
        meridiem(hour, "pm", (0, 1))
