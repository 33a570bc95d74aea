"""Terminal display-width measurement for entry names.

Column counts follow what a terminal actually draws, not ``len``: combining
marks and zero-width format characters take no columns, East Asian
wide/fullwidth characters take two.
"""

from __future__ import annotations

import re
import unicodedata

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f\ud800-\udfff]")
_ESCAPED_BYTE_LOW = 0xDC80
_ESCAPED_BYTE_HIGH = 0xDCFF


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.category(ch) == "Cf":
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def str_display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies."""
    return sum(char_display_width(ch) for ch in text)


def _escape_char(ch: str) -> str:
    code = ord(ch)
    # os.fsdecode maps undecodable filename bytes to U+DC80..U+DCFF.
    if _ESCAPED_BYTE_LOW <= code <= _ESCAPED_BYTE_HIGH:
        return f"\\x{code - 0xDC00:02x}"
    if 0xD800 <= code <= 0xDFFF:
        return f"\\u{code:04x}"
    return f"\\x{code:02x}"


def sanitize_name(name: str) -> str:
    """Escape characters that would break a single-row rendering.

    C0 controls (newline and tab included), DEL, and C1 controls are shown as
    ``\\xNN``. Undecodable filename bytes, which arrive as lone surrogates, are
    shown as the original ``\\xNN`` byte so the row can always be encoded.
    Names without such characters are returned unchanged.
    """
    if _CONTROL_RE.search(name) is None:
        return name
    return _CONTROL_RE.sub(lambda match: _escape_char(match.group(0)), name)


__all__ = [
    "char_display_width",
    "str_display_width",
    "sanitize_name",
]
