"""Decimal byte-unit labels such as ``"2M 0K 512B"``.

Every unit from the largest nonzero one down to bytes is printed. Once a size
reaches terabyte scale all seven units are shown, zeros included.
"""

from __future__ import annotations

from .errors import UnrepresentableSizeError

KILOBYTE = 10**3
MEGABYTE = 10**6
GIGABYTE = 10**9
TERABYTE = 10**12
PETABYTE = 10**15
EXABYTE = 10**18


def format_bytes(size: int) -> str:
    """Return the unit breakdown label for ``size`` bytes.

    Raises ``UnrepresentableSizeError`` for one exabyte or more and
    ``ValueError`` for negative sizes.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if size >= EXABYTE:
        raise UnrepresentableSizeError(size)

    exabytes = size // EXABYTE
    petabytes = size % EXABYTE // PETABYTE
    terabytes = size % PETABYTE // TERABYTE
    gigabytes = size % TERABYTE // GIGABYTE
    megabytes = size % GIGABYTE // MEGABYTE
    kilobytes = size % MEGABYTE // KILOBYTE
    remainder = size % KILOBYTE

    if size < KILOBYTE:
        return f"{remainder}B"
    if size < MEGABYTE:
        return f"{kilobytes}K {remainder}B"
    if size < GIGABYTE:
        return f"{megabytes}M {kilobytes}K {remainder}B"
    if size < TERABYTE:
        return f"{gigabytes}G {megabytes}M {kilobytes}K {remainder}B"
    return f"{exabytes}E {petabytes}P {terabytes}T {gigabytes}G {megabytes}M {kilobytes}K {remainder}B"


__all__ = [
    "KILOBYTE",
    "MEGABYTE",
    "GIGABYTE",
    "TERABYTE",
    "PETABYTE",
    "EXABYTE",
    "format_bytes",
]
