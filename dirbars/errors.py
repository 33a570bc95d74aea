"""Exception types raised by dirbars.

Filesystem failures are not wrapped: the aggregator lets ``OSError`` through.
"""

from __future__ import annotations


class DirbarsError(Exception):
    """Base class for dirbars domain errors."""


class TerminalError(DirbarsError):
    """The output terminal cannot host the listing."""


class TermSizeError(TerminalError):
    """Terminal dimensions could not be obtained."""


class TerminalTooSmallError(TerminalError):
    def __init__(self, columns: int, minimum_columns: int) -> None:
        super().__init__(f"terminal is too small: {columns} columns (minimum {minimum_columns})")
        self.columns = columns
        self.minimum_columns = minimum_columns


class AnsiUnsupportedError(TerminalError):
    def __init__(self) -> None:
        super().__init__("output stream does not support ANSI escape codes")


class UnrepresentableSizeError(DirbarsError):
    """Byte count is outside the range covered by the unit table."""

    def __init__(self, size: int) -> None:
        super().__init__(f"size of {size} bytes is at or above one exabyte")
        self.size = size


__all__ = [
    "DirbarsError",
    "TerminalError",
    "TermSizeError",
    "TerminalTooSmallError",
    "AnsiUnsupportedError",
    "UnrepresentableSizeError",
]
