"""Command-line front door for dirbars.

Parses the optional target path and validates the terminal.
Then sizes, sorts, and renders every top-level entry of the target.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import DEFAULT_LAYOUT
from .errors import DirbarsError
from .render import render_rows
from .size_model import scan_size_entries, sort_by_size
from .terminal import check_terminal, select_terminal_info

logger = logging.getLogger("dirbars")

LOG_FORMAT = "dirbars: %(levelname)s: %(message)s"


def configure_logging(level: int = logging.WARNING) -> None:
    """Attach a single stderr handler to the package logger."""
    if any(getattr(handler, "_dirbars_handler", False) for handler in logger.handlers):
        logger.setLevel(level)
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._dirbars_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def list_directory(path: Path, columns: int) -> None:
    """Size, sort, and print the top-level entries of ``path``."""
    entries = scan_size_entries(path)
    sort_by_size(entries)
    render_rows(entries, columns, sys.stdout, DEFAULT_LAYOUT)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the size listing.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Any terminal, filesystem, or size-range failure is
    logged and ends the process with exit status 1.
    """
    parser = argparse.ArgumentParser(
        description="List directory entries by total size as terminal-width bars."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    args = parser.parse_args()
    configure_logging()

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path

    try:
        columns = check_terminal(select_terminal_info(sys.stdout), DEFAULT_LAYOUT)
        list_directory(path, columns)
    except (DirbarsError, OSError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
