from __future__ import annotations

import io
from pathlib import Path

from lexstream import PositionedReader, TextSource


class _Trickle(io.TextIOBase):
    """Hands out at most two characters per read, then reports end once."""

    def __init__(self, text: str) -> None:
        self._text = text
        self.reads_after_end = 0

    def readable(self) -> bool:
        return True

    def read(self, size: int | None = -1) -> str:
        if not self._text:
            self.reads_after_end += 1
            return ""
        n = 2 if size is None or size < 0 else min(size, 2)
        out, self._text = self._text[:n], self._text[n:]
        return out


class _NothingReady(io.TextIOBase):
    def readable(self) -> bool:
        return True

    def read(self, size: int | None = -1) -> None:  # type: ignore[override]
        return None


def test_read_fills_the_whole_block() -> None:
    src = TextSource.from_text(_Trickle("abcdefg"))
    assert src.read(5) == "abcde"
    assert src.read(5) == "fg"
    assert src.read(5) == ""


def test_peek_is_returned_by_next_read() -> None:
    src = TextSource.from_string("xyz")
    assert src.peek() == "x"
    assert src.peek() == "x"
    assert src.read(2) == "xy"
    assert not src.at_end()
    assert src.read(0) == ""
    assert src.read(9) == "z"
    assert src.at_end()


def test_end_of_data_latches() -> None:
    stream = _Trickle("a")
    src = TextSource.from_text(stream)
    assert src.read(4) == "a"
    assert src.at_end()
    assert src.at_end()
    assert src.peek() == ""
    assert stream.reads_after_end == 1


def test_stream_with_nothing_ready_counts_as_end() -> None:
    reader = PositionedReader.from_text(_NothingReady())
    assert reader.end_of_stream


def test_close_is_idempotent() -> None:
    stream = io.StringIO("abc")
    src = TextSource.from_text(stream)
    with src:
        assert not src.closed
    assert src.closed
    assert stream.closed
    src.close()


def test_raw_byte_stream_is_buffered(tmp_path: Path) -> None:
    p = tmp_path / "raw.txt"
    p.write_bytes(b"1\r2")
    with PositionedReader.from_bytes(io.FileIO(p, "r")) as reader:
        assert [(c.value, c.line, c.column) for c in reader] == [
            ("1", 0, 0),
            ("\r", 0, 1),
            ("2", 1, 0),
        ]
