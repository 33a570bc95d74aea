"""Domain datatypes for sized directory entries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SizeEntry:
    """One top-level directory child and its total size in bytes.

    ``name`` is the base name, not a path. For directories ``size`` is the
    deep sum of regular files below it.
    """

    name: str
    size: int


__all__ = [
    "SizeEntry",
]
