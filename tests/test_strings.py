from __future__ import annotations

import pytest

from lexstream import EmptyStringError, Position, PositionedChar, PositionedString


def _word(text: str, line: int, column: int) -> PositionedString:
    return PositionedString(PositionedChar(line, column + i, ch) for i, ch in enumerate(text))


def test_equality_ignores_span() -> None:
    a = _word("cat", 0, 0)
    b = _word("cat", 5, 1)
    assert (a.from_line, a.from_column, a.to_line, a.to_column) == (0, 0, 0, 2)
    assert (b.from_line, b.from_column, b.to_line, b.to_column) == (5, 1, 5, 3)
    assert a == b
    assert a == "cat"
    assert "cat" == b
    assert hash(a) == hash(b) == hash("cat")
    assert a != _word("cow", 0, 0)
    assert a != 3


def test_empty_sequence_is_rejected() -> None:
    with pytest.raises(EmptyStringError):
        PositionedString([])
    with pytest.raises(ValueError):
        PositionedString(iter(()))


def test_views() -> None:
    s = _word("héllo", 2, 4)
    assert s.length == len(s) == len(s.to_text()) == 5
    assert s.to_text() == str(s) == "héllo"
    assert s.to_char_array() == ["h", "é", "l", "l", "o"]
    assert s.span.start == Position(2, 4)
    assert s.span.end == Position(2, 8)
    assert s.span.start <= s.span.end
    assert repr(s) == "PositionedString('héllo', 3:5-3:9)"


def test_span_crosses_lines() -> None:
    chars = [PositionedChar(0, 0, "a"), PositionedChar(0, 1, "\n"), PositionedChar(1, 0, "b")]
    s = PositionedString(chars)
    assert (s.from_line, s.from_column) == (0, 0)
    assert (s.to_line, s.to_column) == (1, 0)
    assert s == "a\nb"


def test_is_immutable() -> None:
    s = _word("x", 0, 0)
    with pytest.raises(AttributeError):
        s.from_line = 4  # type: ignore[misc]
    arr = s.to_char_array()
    arr.append("y")
    assert s == "x"


def test_single_character_string() -> None:
    s = PositionedString([PositionedChar(3, 7, "z")])
    assert s.span.start == s.span.end == Position(3, 7)
    assert s.length == 1
