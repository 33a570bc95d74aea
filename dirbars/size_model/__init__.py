"""Domain model for per-entry directory sizes.

This package contains the non-rendering pieces:
- the ``SizeEntry`` datatype
- recursive size aggregation over a directory tree
- the stable size sort
"""

from __future__ import annotations

from .types import SizeEntry
from .fs import directory_size, scan_size_entries
from .sort import sort_by_size

__all__ = [
    "SizeEntry",
    "directory_size",
    "scan_size_entries",
    "sort_by_size",
]
