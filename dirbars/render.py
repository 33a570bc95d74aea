"""Bar-row rendering for sized entries.

Each row is ``|<name><padding><size>|`` and spans the row budget in display
columns. Wide terminals get half-width rows, narrow ones full-width rows.
Names too long for the budget are kept whole with zero padding.
"""

from __future__ import annotations

import io
from collections.abc import Iterable
from typing import TextIO

from .ansi import sanitize_name, str_display_width
from .byte_units import format_bytes
from .config import DEFAULT_LAYOUT, FULL_PRINT_TOLERANCE, LayoutConfig
from .size_model import SizeEntry

ROW_DELIMITER = "|"


def row_budget(columns: int, tolerance: int = FULL_PRINT_TOLERANCE) -> int:
    """Return usable row width: half of ``columns`` above ``tolerance``."""
    if columns > tolerance:
        return columns // 2
    return columns


def padding_width(budget: int, name: str, size_label: str) -> int:
    """Return spaces between name and size label, never below zero."""
    used = str_display_width(name) + len(size_label) + 2 * len(ROW_DELIMITER)
    return max(0, budget - used)


def format_row(columns: int, name: str, size_label: str, layout: LayoutConfig = DEFAULT_LAYOUT) -> str:
    """Return one bar row (without newline) for a terminal ``columns`` wide."""
    budget = row_budget(columns, layout.full_print_tolerance)
    padding = " " * padding_width(budget, name, size_label)
    return f"{ROW_DELIMITER}{name}{padding}{size_label}{ROW_DELIMITER}"


def render_rows(
    entries: Iterable[SizeEntry],
    columns: int,
    out: TextIO,
    layout: LayoutConfig = DEFAULT_LAYOUT,
) -> None:
    """Write one row per entry to ``out`` and flush once.

    Rows are buffered in memory first; if any size cannot be labeled nothing
    reaches ``out``.
    """
    buffer = io.StringIO()
    for entry in entries:
        buffer.write(format_row(columns, sanitize_name(entry.name), format_bytes(entry.size), layout))
        buffer.write("\n")
    out.write(buffer.getvalue())
    out.flush()


__all__ = [
    "ROW_DELIMITER",
    "row_budget",
    "padding_width",
    "format_row",
    "render_rows",
]
