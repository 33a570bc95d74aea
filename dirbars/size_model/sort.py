"""Stable in-place merge sort of size entries, smallest first."""

from __future__ import annotations

from .types import SizeEntry


def sort_by_size(entries: list[SizeEntry]) -> None:
    """Sort ``entries`` ascending by size, keeping ties in input order.

    A single scratch list the length of ``entries`` is shared by every merge.
    """
    if len(entries) <= 1:
        return
    scratch: list[SizeEntry] = list(entries)
    _merge_sort(entries, scratch, 0, len(entries))


def _merge_sort(items: list[SizeEntry], scratch: list[SizeEntry], lo: int, hi: int) -> None:
    if hi - lo <= 1:
        return
    mid = (lo + hi) // 2
    _merge_sort(items, scratch, lo, mid)
    _merge_sort(items, scratch, mid, hi)

    left = lo
    right = mid
    out = lo
    while left < mid and right < hi:
        # Taking from the left on ties keeps the sort stable.
        if items[left].size <= items[right].size:
            scratch[out] = items[left]
            left += 1
        else:
            scratch[out] = items[right]
            right += 1
        out += 1

    if left < mid:
        scratch[out:hi] = items[left:mid]
    else:
        scratch[out:hi] = items[right:hi]
    items[lo:hi] = scratch[lo:hi]


__all__ = [
    "sort_by_size",
]
