"""Layout thresholds shared by terminal checks and row rendering.

Nothing is read from disk or the environment; these are fixed defaults.
"""

from __future__ import annotations

from dataclasses import dataclass

FULL_PRINT_TOLERANCE = 75
MINIMUM_COLUMNS = 30


@dataclass(frozen=True)
class LayoutConfig:
    """Column thresholds for the bar layout.

    Terminals wider than ``full_print_tolerance`` use half their width per
    row. Terminals narrower than ``minimum_columns`` are rejected.
    """

    full_print_tolerance: int = FULL_PRINT_TOLERANCE
    minimum_columns: int = MINIMUM_COLUMNS


DEFAULT_LAYOUT = LayoutConfig()


__all__ = [
    "FULL_PRINT_TOLERANCE",
    "MINIMUM_COLUMNS",
    "LayoutConfig",
    "DEFAULT_LAYOUT",
]
