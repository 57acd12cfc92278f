from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import BinaryIO, TextIO

from loguru import logger

from .chars import PositionedChar
from .config import ReaderConfig
from .errors import EndOfDataError
from .sources import TextSource


class PositionedReader:
    """Forward-only reader that tags every character with its line and column.

    Characters are pulled from the source in blocks of ``config.block_size``,
    positioned, and queued. ``\\n``, ``\\r`` and ``\\r\\n`` each end a line;
    the raw terminator characters are still handed out, and both halves of a
    ``\\r\\n`` pair sit on the line they terminate.

    The reader owns its source and closes it on :meth:`close` or when leaving
    a ``with`` block::

        with PositionedReader.from_string("ab\\ncd") as reader:
            for ch in reader.read_line():
                ...

    Reading past the end raises :class:`EndOfDataError`; check
    :attr:`end_of_stream` first.
    """

    def __init__(self, source: TextSource, *, config: ReaderConfig | None = None) -> None:
        self._source = source
        self._config = config or ReaderConfig()
        self._cache: deque[PositionedChar] = deque()
        self._line = 0
        self._column = 0

    @classmethod
    def from_string(cls, text: str, *, config: ReaderConfig | None = None) -> PositionedReader:
        return cls(TextSource.from_string(text), config=config)

    @classmethod
    def from_bytes(cls, stream: BinaryIO, *, config: ReaderConfig | None = None) -> PositionedReader:
        config = config or ReaderConfig()
        source = TextSource.from_bytes(stream, encoding=config.encoding, errors=config.errors)
        return cls(source, config=config)

    @classmethod
    def from_text(cls, stream: TextIO, *, config: ReaderConfig | None = None) -> PositionedReader:
        return cls(TextSource.from_text(stream), config=config)

    @property
    def config(self) -> ReaderConfig:
        return self._config

    @property
    def line(self) -> int:
        """Line the next character pulled from the source will be given."""
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def end_of_stream(self) -> bool:
        return not self._cache and self._source.at_end()

    def peek(self) -> PositionedChar:
        self._ensure_cache()
        return self._cache[0]

    def read(self) -> PositionedChar:
        self._ensure_cache()
        return self._cache.popleft()

    def precache(self) -> PositionedReader:
        self._ensure_cache()
        return self

    def read_to_end(self) -> Iterator[PositionedChar]:
        while not self.end_of_stream:
            yield self.read()

    def __iter__(self) -> Iterator[PositionedChar]:
        return self.read_to_end()

    def read_line(self) -> Iterator[PositionedChar]:
        """Yield one logical line, terminator included.

        The last line of the text may come without a terminator.
        """
        while not self.end_of_stream:
            ch = self.read()
            yield ch
            if ch == "\r" or ch == "\n":
                if ch == "\r" and not self.end_of_stream and self.peek() == "\n":
                    yield self.read()
                return

    def _ensure_cache(self) -> None:
        if self._cache:
            return
        if self._source.at_end():
            raise EndOfDataError(line=self._line, column=self._column)

        block = self._source.read(self._config.block_size)
        # Keep a "\r\n" pair inside one block so it is positioned as one terminator.
        if block.endswith("\r") and self._source.peek() == "\n":
            block += self._source.read(1)
        logger.debug("refilling {} chars at {}:{}", len(block), self._line, self._column)

        cache = self._cache
        line, column = self._line, self._column
        i, n = 0, len(block)
        while i < n:
            ch = block[i]
            cache.append(PositionedChar(line, column, ch))
            column += 1
            if ch == "\r" or ch == "\n":
                if ch == "\r" and i + 1 < n and block[i + 1] == "\n":
                    i += 1
                    cache.append(PositionedChar(line, column, "\n"))
                line += 1
                column = 0
            i += 1
        self._line, self._column = line, column

    def close(self) -> None:
        self._source.close()

    def __enter__(self) -> PositionedReader:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
