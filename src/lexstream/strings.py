from __future__ import annotations

from collections.abc import Iterable

from .chars import PositionedChar
from .errors import EmptyStringError
from .spans import Position, Span


class PositionedString:
    """An immutable run of positioned chars, usually one line or one token.

    Like :class:`PositionedChar`, equality ignores positions: two positioned
    strings are equal when their text is equal, and a positioned string is
    equal to a plain ``str`` with the same text.
    """

    __slots__ = ("_chars", "_text")

    def __init__(self, chars: Iterable[PositionedChar]) -> None:
        self._chars: tuple[PositionedChar, ...] = tuple(chars)
        if not self._chars:
            raise EmptyStringError()
        self._text = "".join(c.value for c in self._chars)

    @property
    def from_line(self) -> int:
        return self._chars[0].line

    @property
    def from_column(self) -> int:
        return self._chars[0].column

    @property
    def to_line(self) -> int:
        return self._chars[-1].line

    @property
    def to_column(self) -> int:
        return self._chars[-1].column

    @property
    def length(self) -> int:
        return len(self._chars)

    @property
    def span(self) -> Span:
        return Span(
            start=Position(self.from_line, self.from_column),
            end=Position(self.to_line, self.to_column),
        )

    def to_text(self) -> str:
        return self._text

    def to_char_array(self) -> list[str]:
        return [c.value for c in self._chars]

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"PositionedString({self._text!r}, {self.span.format()})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PositionedString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)
