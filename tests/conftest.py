"""Shared fixtures: a fixed reference time of 2018-03-21 (a Wednesday) 11:00 +02:00."""

from datetime import datetime, timedelta, timezone

import pytest

UTC_PLUS_2 = timezone(timedelta(hours=2))
BASE = datetime(2018, 3, 21, 11, 0, 0, tzinfo=UTC_PLUS_2)


@pytest.fixture
def base():
    return BASE


@pytest.fixture
def iso():
    """Resolve `text` against BASE and render it the way the expectations are written."""
    from interim import Dialect, parse_date_string

    def _iso(text, dialect=Dialect.UK, now=BASE):
        return parse_date_string(text, now, dialect).isoformat()

    return _iso
