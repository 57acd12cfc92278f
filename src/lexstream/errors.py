from __future__ import annotations

from dataclasses import dataclass


class ReaderError(Exception):
    """Base class for errors raised by lexstream."""


@dataclass(slots=True)
class EndOfDataError(ReaderError, EOFError):
    line: int
    column: int
    message: str = "no more characters to read"

    def __str__(self) -> str:
        return f"{self.line + 1}:{self.column + 1}: {self.message}"


class EmptyStringError(ReaderError, ValueError):
    def __init__(self, message: str = "a positioned string needs at least one character") -> None:
        super().__init__(message)
