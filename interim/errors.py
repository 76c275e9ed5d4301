# interim/errors.py
"""
Error taxonomy shared by the lexer, parser and resolver.

Every failure is a DateError (a ValueError), so callers match on one type.
The fields carry the structure; str() is only a convenience rendering.
"""
from __future__ import annotations
from typing import Tuple

Span = Tuple[int, int]


class DateError(ValueError):
    """Base class; equality is by type and fields."""

    def _fields(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._fields())

    def __repr__(self) -> str:
        args = ", ".join(repr(f) for f in self._fields())
        return f"{type(self).__name__}({args})"


class UnexpectedToken(DateError):
    def __init__(self, expected: str, span: Span):
        self.expected = expected
        self.span = (span[0], span[1])
        super().__init__(f"expected {expected} at position {self.span[0]}..{self.span[1]}")

    def _fields(self) -> tuple:
        return (self.expected, self.span)


class UnexpectedEndOfText(DateError):
    def __init__(self, expected: str):
        self.expected = expected
        super().__init__(f"expected {expected} at the end of the input")

    def _fields(self) -> tuple:
        return (self.expected,)


class MissingDate(DateError):
    def __init__(self):
        super().__init__("date could not be parsed from input")


class MissingTime(DateError):
    def __init__(self):
        super().__init__("time could not be parsed from input")


# parse_duration only
class UnexpectedDate(DateError):
    def __init__(self):
        super().__init__("expected relative date, found a named date")


class UnexpectedAbsoluteDate(DateError):
    def __init__(self):
        super().__init__("expected relative date, found an exact date")


class UnexpectedTime(DateError):
    def __init__(self):
        super().__init__("expected duration, found time")
