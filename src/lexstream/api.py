from __future__ import annotations

import io
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO, TextIO

from .config import ReaderConfig
from .reader import PositionedReader
from .strings import PositionedString


def open_source(
    src: str | bytes | bytearray | TextIO | BinaryIO,
    *,
    config: ReaderConfig | None = None,
) -> PositionedReader:
    """Build a reader for in-memory text, encoded bytes, or an open stream.

    Streams are owned by the returned reader and closed with it.
    """
    if isinstance(src, str):
        return PositionedReader.from_string(src, config=config)
    if isinstance(src, (bytes, bytearray)):
        return PositionedReader.from_bytes(io.BytesIO(src), config=config)
    if isinstance(src, io.TextIOBase):
        return PositionedReader.from_text(src, config=config)
    if isinstance(src, (io.RawIOBase, io.BufferedIOBase)):
        return PositionedReader.from_bytes(src, config=config)
    raise TypeError(f"cannot read characters from {type(src).__name__!r}")


def open_file(path: str | Path, *, config: ReaderConfig | None = None) -> PositionedReader:
    p = Path(path).expanduser()
    fh = p.open("rb")
    try:
        return PositionedReader.from_bytes(fh, config=config)
    except BaseException:
        fh.close()
        raise


def read_lines(reader: PositionedReader) -> Iterator[PositionedString]:
    """Yield each remaining logical line, terminator included."""
    while not reader.end_of_stream:
        yield PositionedString(reader.read_line())


def read_text(reader: PositionedReader) -> PositionedString | None:
    chars = tuple(reader.read_to_end())
    if not chars:
        return None
    return PositionedString(chars)
