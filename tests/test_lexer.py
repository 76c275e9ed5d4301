"""Tokenizer and cursor tests."""

import pytest

from interim.lexer import MAX_NUMBER, Kind, Lexer, Token, tokenize


def kinds(text):
    return [t.kind for t in tokenize(text)]


def test_iso_timestamp_tokens():
    toks = tokenize("2017-06-30T08:20:30Z")
    assert [t.text for t in toks] == ["2017", "-", "06", "-", "30", "T", "08", ":", "20", ":", "30", "Z"]
    assert toks[0] == Token(Kind.NUMBER, "2017", 0, 4, 2017)
    assert toks[5] == Token(Kind.IDENT, "T", 10, 11)
    assert toks[-1].span == (19, 20)


def test_digits_and_letters_split_without_spaces():
    assert kinds("3h") == [Kind.NUMBER, Kind.IDENT]
    assert kinds("12.15pm") == [Kind.NUMBER, Kind.DOT, Kind.NUMBER, Kind.IDENT]


def test_whitespace_is_skipped_but_spans_are_character_offsets():
    toks = tokenize("  June   30,\t2018")
    assert [(t.text, t.span) for t in toks] == [
        ("June", (2, 6)), ("30", (9, 11)), (",", (11, 12)), ("2018", (13, 17)),
    ]


@pytest.mark.parametrize("ch,kind", [
    ("-", Kind.DASH), ("/", Kind.SLASH), (":", Kind.COLON),
    (".", Kind.DOT), (",", Kind.COMMA), ("+", Kind.PLUS),
])
def test_punctuation(ch, kind):
    assert kinds(ch) == [kind]


def test_leading_zeros_keep_text():
    tok = tokenize("000001")[0]
    assert tok.value == 1
    assert tok.text == "000001"


def test_number_limit():
    assert tokenize(str(MAX_NUMBER))[0].kind is Kind.NUMBER
    big = tokenize(str(MAX_NUMBER + 1))[0]
    assert big.kind is Kind.ERROR
    assert big.value is None


@pytest.mark.parametrize("text", ["#", "é", "٣"])
def test_unknown_characters_are_error_tokens(text):
    toks = tokenize(text)
    assert toks == [Token(Kind.ERROR, text, 0, 1)]


def test_error_token_does_not_stop_scanning():
    assert kinds("3 # h") == [Kind.NUMBER, Kind.ERROR, Kind.IDENT]


def test_is_word_ignores_case():
    tok = tokenize("PM")[0]
    assert tok.is_word("am", "pm")
    assert not tok.is_word("am")
    assert not tokenize("12")[0].is_word("12")


def test_empty_input():
    assert tokenize("") == []
    assert tokenize("   ") == []


# ---------------------------------------------------------------------------
# Lexer cursor
# ---------------------------------------------------------------------------

def test_cursor_walks_tokens():
    lx = Lexer("next friday")
    assert lx.peek().text == "next"
    assert lx.next().text == "next"
    assert lx.span == (0, 4)
    assert lx.next().text == "friday"
    assert lx.at_end
    assert lx.next() is None
    assert lx.span == (11, 11)


def test_save_and_restore():
    lx = Lexer("4 July 10:30")
    lx.next()
    mark = lx.save()
    lx.next()
    lx.next()
    assert lx.span == (7, 9)
    lx.restore(mark)
    assert lx.span == (0, 1)
    assert lx.next().text == "July"


def test_restore_to_start():
    lx = Lexer("friday")
    lx.next()
    lx.restore(0)
    assert not lx.at_end
    assert lx.span == (6, 6)
