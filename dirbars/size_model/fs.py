"""Filesystem walking that totals regular-file sizes per top-level entry.

Symlinks are never followed. Symlinks, sockets, devices and fifos contribute
zero bytes. Any ``OSError`` raised while walking propagates to the caller.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .types import SizeEntry

logger = logging.getLogger(__name__)


def _entry_size(entry: os.DirEntry[str]) -> int:
    """Return the byte total contributed by one scanned entry."""
    if entry.is_dir(follow_symlinks=False):
        return directory_size(entry.path)
    if entry.is_file(follow_symlinks=False):
        return int(entry.stat(follow_symlinks=False).st_size)
    return 0


def directory_size(directory: str | os.PathLike[str]) -> int:
    """Return the deep sum of regular-file sizes under ``directory``."""
    total = 0
    with os.scandir(directory) as entries:
        for entry in entries:
            total += _entry_size(entry)
    return total


def scan_size_entries(directory: str | os.PathLike[str]) -> list[SizeEntry]:
    """Build one ``SizeEntry`` per child of ``directory`` in iteration order."""
    results: list[SizeEntry] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            size = _entry_size(entry)
            logger.debug("sized %s: %d bytes", Path(entry.path), size)
            results.append(SizeEntry(name=entry.name, size=size))
    return results


__all__ = [
    "directory_size",
    "scan_size_entries",
]
