from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A line/column location in the text being read.

    Both numbers are 0-based. Ordering follows reading order.
    """

    line: int
    column: int

    def format(self) -> str:
        return f"{self.line + 1}:{self.column + 1}"


@dataclass(frozen=True, slots=True)
class Span:
    """Closed span [start, end]: both ends point at a character."""

    start: Position
    end: Position

    def format(self) -> str:
        return f"{self.start.format()}-{self.end.format()}"
