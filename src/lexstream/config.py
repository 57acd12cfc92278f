from __future__ import annotations

import codecs
from dataclasses import dataclass


DEFAULT_BLOCK_SIZE = 4096


@dataclass(frozen=True, slots=True)
class ReaderConfig:
    block_size: int = DEFAULT_BLOCK_SIZE
    encoding: str = "utf-8"
    errors: str = "strict"  # codec error handler for byte streams

    def __post_init__(self) -> None:
        if self.block_size < 1:
            raise ValueError(f"block_size must be positive, got {self.block_size}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"unknown encoding: {self.encoding!r}") from None
        try:
            codecs.lookup_error(self.errors)
        except LookupError:
            raise ValueError(f"unknown codec error handler: {self.errors!r}") from None
