"""Terminal width and ANSI capability queries for the output stream.

One backend is chosen per platform: POSIX asks the tty driver through the
``TIOCGWINSZ`` ioctl, Windows reads the console screen buffer. Callers only
see the ``TerminalInfo`` interface.
"""

from __future__ import annotations

import logging
import os
import struct
import sys
from typing import TextIO

from .config import DEFAULT_LAYOUT, LayoutConfig
from .errors import AnsiUnsupportedError, TermSizeError, TerminalTooSmallError

logger = logging.getLogger(__name__)

STD_OUTPUT_HANDLE = -11
INVALID_HANDLE_VALUE = -1
ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004


class TerminalInfo:
    """Capability interface for the terminal behind the output stream."""

    def columns(self) -> int:
        raise NotImplementedError

    def supports_ansi(self) -> bool:
        raise NotImplementedError


class PosixTerminalInfo(TerminalInfo):
    def __init__(self, fd: int) -> None:
        self.fd = fd

    def columns(self) -> int:
        """Return ``ws_col`` from the tty window size."""
        import fcntl
        import termios

        try:
            packed = fcntl.ioctl(self.fd, termios.TIOCGWINSZ, struct.pack("HHHH", 0, 0, 0, 0))
        except OSError as exc:
            logger.debug("TIOCGWINSZ ioctl failed on fd %d: %s", self.fd, exc)
            raise TermSizeError(f"cannot get the terminal size: {exc}") from exc
        _rows, cols, _xpixel, _ypixel = struct.unpack("HHHH", packed)
        if cols <= 0:
            logger.debug("TIOCGWINSZ reported zero columns on fd %d", self.fd)
            raise TermSizeError("terminal reported zero columns")
        return int(cols)

    def supports_ansi(self) -> bool:
        return os.isatty(self.fd)


class WindowsTerminalInfo(TerminalInfo):
    """Console-buffer backed terminal info for Windows consoles."""

    def __init__(self, handle_id: int = STD_OUTPUT_HANDLE) -> None:
        self.handle_id = handle_id

    def _kernel32(self):
        import ctypes

        return ctypes.windll.kernel32

    def _handle(self) -> int:
        handle = self._kernel32().GetStdHandle(self.handle_id)
        if not handle or handle == INVALID_HANDLE_VALUE:
            logger.debug("GetStdHandle(%d) returned %r", self.handle_id, handle)
            raise TermSizeError("cannot get the stdout handle")
        return handle

    def columns(self) -> int:
        """Return the console screen buffer width (``dwSize.X``)."""
        import ctypes
        from ctypes import wintypes

        class CONSOLE_SCREEN_BUFFER_INFO(ctypes.Structure):
            _fields_ = [
                ("dwSize", wintypes._COORD),
                ("dwCursorPosition", wintypes._COORD),
                ("wAttributes", wintypes.WORD),
                ("srWindow", wintypes.SMALL_RECT),
                ("dwMaximumWindowSize", wintypes._COORD),
            ]

        handle = self._handle()
        console_info = CONSOLE_SCREEN_BUFFER_INFO()
        if not self._kernel32().GetConsoleScreenBufferInfo(handle, ctypes.byref(console_info)):
            logger.debug("GetConsoleScreenBufferInfo failed")
            raise TermSizeError("cannot get the console screen buffer info")
        cols = int(console_info.dwSize.X)
        if cols <= 0:
            logger.debug("console screen buffer reported %d columns", cols)
            raise TermSizeError("terminal reported zero columns")
        return cols

    def supports_ansi(self) -> bool:
        import ctypes
        from ctypes import wintypes

        try:
            handle = self._handle()
        except TermSizeError:
            return False
        mode = wintypes.DWORD()
        if not self._kernel32().GetConsoleMode(handle, ctypes.byref(mode)):
            return False
        return bool(mode.value & ENABLE_VIRTUAL_TERMINAL_PROCESSING)


def select_terminal_info(stream: TextIO | None = None) -> TerminalInfo:
    """Return the terminal backend for the current platform.

    ``stream`` defaults to ``sys.stdout``; on POSIX its file descriptor is
    queried. Unsupported platforms raise ``TermSizeError``.
    """
    if sys.platform == "win32":
        return WindowsTerminalInfo()
    if os.name == "posix":
        target = sys.stdout if stream is None else stream
        try:
            fd = target.fileno()
        except (AttributeError, OSError, ValueError) as exc:
            raise TermSizeError("output stream has no file descriptor") from exc
        return PosixTerminalInfo(fd)
    raise TermSizeError(f"unsupported platform: {sys.platform}")


def check_terminal(info: TerminalInfo, layout: LayoutConfig = DEFAULT_LAYOUT) -> int:
    """Validate the terminal and return its column count.

    Width is checked before ANSI support.
    """
    columns = info.columns()
    if columns < layout.minimum_columns:
        raise TerminalTooSmallError(columns, layout.minimum_columns)
    if not info.supports_ansi():
        raise AnsiUnsupportedError()
    return columns


__all__ = [
    "TerminalInfo",
    "PosixTerminalInfo",
    "WindowsTerminalInfo",
    "select_terminal_info",
    "check_terminal",
]
