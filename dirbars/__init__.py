"""dirbars: list a directory's entries by total size as terminal-width bars.

Exports ``main`` for programmatic CLI invocation. Sizing lives in
``dirbars.size_model``, row layout in ``dirbars.render``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
