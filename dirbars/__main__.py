"""Module entrypoint for ``python -m dirbars``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and terminal checks happen in ``dirbars.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
