# interim/lexer.py
from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

MAX_NUMBER = 2**32 - 1


class Kind(Enum):
    NUMBER = "number"
    IDENT = "identifier"
    DASH = "-"
    SLASH = "/"
    COLON = ":"
    DOT = "."
    COMMA = ","
    PLUS = "+"
    ERROR = "error"


PUNCTUATION = {k.value: k for k in (Kind.DASH, Kind.SLASH, Kind.COLON, Kind.DOT, Kind.COMMA, Kind.PLUS)}

# ASCII only: str.isdigit()/isalpha() would also accept other scripts
_TOKEN_RE = re.compile(r"(?P<ws>[ \t\n\f]+)|(?P<num>[0-9]+)|(?P<ident>[a-zA-Z]+)|(?P<punct>[-/:.,+])")


@dataclass(frozen=True)
class Token:
    kind: Kind
    text: str
    start: int
    end: int
    value: Optional[int] = None   # NUMBER only

    @property
    def span(self) -> Tuple[int, int]:
        return (self.start, self.end)

    def is_word(self, *words: str) -> bool:
        return self.kind is Kind.IDENT and self.text.lower() in words


def tokenize(text: str) -> List[Token]:
    tokens: List[Token] = []
    pos = 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            tokens.append(Token(Kind.ERROR, text[pos], pos, pos + 1))
            pos += 1
            continue
        s, e = m.span()
        pos = e
        if m.lastgroup == "ws":
            continue
        if m.lastgroup == "num":
            n = int(m.group())
            if n > MAX_NUMBER:
                tokens.append(Token(Kind.ERROR, m.group(), s, e))
            else:
                tokens.append(Token(Kind.NUMBER, m.group(), s, e, n))
        elif m.lastgroup == "ident":
            tokens.append(Token(Kind.IDENT, m.group(), s, e))
        else:
            tokens.append(Token(PUNCTUATION[m.group()], m.group(), s, e))
    return tokens


class Lexer:
    """
    Cursor over the token list of one input string.
    save()/restore() give the parser its backtracking points.
    """

    def __init__(self, text: str):
        self.text = text
        self.tokens = tokenize(text)
        self.pos = 0
        self._last: Optional[Token] = None

    def next(self) -> Optional[Token]:
        if self.pos >= len(self.tokens):
            self._last = None
            return None
        tok = self.tokens[self.pos]
        self.pos += 1
        self._last = tok
        return tok

    def peek(self) -> Optional[Token]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def save(self) -> int:
        return self.pos

    def restore(self, pos: int) -> None:
        self.pos = pos
        self._last = self.tokens[pos - 1] if pos > 0 else None

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    @property
    def span(self) -> Tuple[int, int]:
        """Span of the last consumed token; (len, len) once input ran out."""
        if self._last is None:
            n = len(self.text)
            return (n, n)
        return self._last.span
