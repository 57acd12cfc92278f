from __future__ import annotations

from loguru import logger

from .api import open_file, open_source, read_lines, read_text
from .chars import PositionedChar
from .config import DEFAULT_BLOCK_SIZE, ReaderConfig
from .errors import EmptyStringError, EndOfDataError, ReaderError
from .reader import PositionedReader
from .sources import TextSource
from .spans import Position, Span
from .strings import PositionedString

# Library code stays quiet until the application calls logger.enable("lexstream").
logger.disable("lexstream")

__all__ = [
    "DEFAULT_BLOCK_SIZE",
    "EmptyStringError",
    "EndOfDataError",
    "Position",
    "PositionedChar",
    "PositionedReader",
    "PositionedString",
    "ReaderConfig",
    "ReaderError",
    "Span",
    "TextSource",
    "open_file",
    "open_source",
    "read_lines",
    "read_text",
]
