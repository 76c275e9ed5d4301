# interim/__init__.py
from .backend import DateTimeBackend, DatetimeBackend
from .errors import (
    DateError, MissingDate, MissingTime, UnexpectedAbsoluteDate, UnexpectedDate,
    UnexpectedEndOfText, UnexpectedTime, UnexpectedToken,
)
from .model import Days, Dialect, Interval, Months, Seconds
from .timeparse import parse_date_string, parse_duration

__all__ = [
    "parse_date_string", "parse_duration",
    "Dialect", "Interval", "Seconds", "Days", "Months",
    "DateTimeBackend", "DatetimeBackend",
    "DateError", "UnexpectedToken", "UnexpectedEndOfText", "MissingDate", "MissingTime",
    "UnexpectedDate", "UnexpectedAbsoluteDate", "UnexpectedTime",
]

try:
    from importlib.metadata import version as _dist_version
    __version__ = _dist_version("interim")
except Exception:
    # Fallback during editable installs or if metadata is unavailable
    __version__ = "0.0.0"
