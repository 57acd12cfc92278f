from __future__ import annotations

import io
from typing import BinaryIO, TextIO

from loguru import logger


class TextSource:
    """Pull-based access to a text stream with one character of lookahead.

    ``read(n)`` behaves like a blocking block read: it only returns fewer than
    ``n`` characters when the stream is exhausted. Once the stream has reported
    end of data the source stays exhausted, even if the stream would produce
    more later.
    """

    __slots__ = ("_stream", "_lookahead", "_exhausted", "_closed")

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._lookahead = ""
        self._exhausted = False
        self._closed = False

    @classmethod
    def from_string(cls, text: str) -> TextSource:
        # newline="" keeps "\r" and "\r\n" untranslated.
        return cls(io.StringIO(text, newline=""))

    @classmethod
    def from_bytes(
        cls,
        stream: BinaryIO,
        *,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> TextSource:
        if isinstance(stream, io.RawIOBase):
            stream = io.BufferedReader(stream)
        return cls(io.TextIOWrapper(stream, encoding=encoding, errors=errors, newline=""))

    @classmethod
    def from_text(cls, stream: TextIO) -> TextSource:
        return cls(stream)

    @property
    def closed(self) -> bool:
        return self._closed

    def _pull(self, n: int) -> str:
        if self._exhausted:
            return ""
        # Non-blocking streams return None when nothing is ready; that counts as the end.
        chunk = self._stream.read(n)
        if not chunk:
            self._exhausted = True
            return ""
        return chunk

    def peek(self) -> str:
        """Next character without consuming it, or ``""`` at end of data."""
        if not self._lookahead:
            self._lookahead = self._pull(1)
        return self._lookahead

    def at_end(self) -> bool:
        return self.peek() == ""

    def read(self, n: int) -> str:
        if n <= 0:
            return ""
        parts: list[str] = []
        if self._lookahead:
            parts.append(self._lookahead)
            self._lookahead = ""
            n -= 1
        while n > 0:
            chunk = self._pull(n)
            if not chunk:
                break
            parts.append(chunk)
            n -= len(chunk)
        return "".join(parts)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        logger.debug("closing text source {!r}", self._stream)
        self._stream.close()

    def __enter__(self) -> TextSource:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
