from __future__ import annotations

from dataclasses import dataclass

from .spans import Position


@dataclass(frozen=True, slots=True, eq=False)
class PositionedChar:
    """A single character together with the line/column it was read from.

    Equality and hashing look at ``value`` only. Two positioned chars read
    from different places compare equal when they hold the same character,
    and a positioned char compares equal to the bare one-character string::

        PositionedChar(0, 0, "a") == PositionedChar(7, 3, "a")  # True
        PositionedChar(0, 0, "\\n") == "\\n"                      # True

    Compare ``position`` explicitly when location matters.
    """

    line: int
    column: int
    value: str

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PositionedChar):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"PositionedChar({self.value!r}, {self.line}:{self.column})"

    @property
    def position(self) -> Position:
        return Position(self.line, self.column)

    def to_char(self) -> str:
        return self.value

    @property
    def is_whitespace(self) -> bool:
        return self.value.isspace()

    @property
    def is_number(self) -> bool:
        return self.value.isnumeric()

    @property
    def is_digit(self) -> bool:
        return self.value.isdecimal()

    @property
    def is_letter(self) -> bool:
        return self.value.isalpha()

    @property
    def is_lower(self) -> bool:
        return self.value.islower()

    @property
    def is_upper(self) -> bool:
        return self.value.isupper()

    @property
    def is_ascii(self) -> bool:
        return self.value.isascii()

    def is_between(self, lower: str, upper: str) -> bool:
        """True when ``lower <= value <= upper`` by code point."""
        return lower <= self.value <= upper

    def lower(self) -> PositionedChar:
        return self._with_value(self.value.lower())

    def upper(self) -> PositionedChar:
        return self._with_value(self.value.upper())

    def _with_value(self, value: str) -> PositionedChar:
        # Full case mappings can expand ("ß" -> "SS"); keep one character.
        if len(value) != 1:
            value = self.value
        return PositionedChar(self.line, self.column, value)
