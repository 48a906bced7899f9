"""Display-width aware text helpers used when rendering media player metadata."""

from __future__ import annotations

from typing import Any

from wcwidth import wcwidth

_SOFT_HYPHEN = "\u00ad"
_US_PER_SECOND = 1_000_000
_US_PER_MINUTE = 60 * _US_PER_SECOND
_US_PER_HOUR = 60 * _US_PER_MINUTE


def _char_width(char: str) -> int:
    if char == _SOFT_HYPHEN:
        return 0
    width = wcwidth(char)
    if width == 2:
        return 2
    if width == 0:
        return 0
    return 1


def _is_surrogate(char: str) -> bool:
    return 0xD800 <= ord(char) <= 0xDFFF


def utf8_truncate(text: str, width: int | None = None) -> tuple[str, int]:
    """Measure ``text`` and cut it to at most ``width`` columns.

    Wide characters count as two columns, zero-width characters and soft hyphens
    as none. When ``width`` is given, the text is cut after the last non-space
    character that still fits. Returns the possibly shortened text and the
    column width of the original text.
    """
    if not text:
        return text, 0

    if any(_is_surrogate(char) for char in text):
        # Not valid text: fall back to counting code units.
        if width is not None and len(text) > width:
            text = text[:width]
        return text, len(text)

    total_width = 0
    trunc_end: int | None = None
    for index, char in enumerate(text):
        total_width += _char_width(char)
        if width is not None and total_width <= width and not char.isspace():
            trunc_end = index + 1

    if trunc_end is not None:
        text = text[:trunc_end]
    return text, total_width


def text_width(text: str) -> int:
    """Return the column width of ``text``."""
    return utf8_truncate(text)[1]


def truncate(text: str, ellipsis: str, max_len: int) -> str:
    """Shorten ``text`` to ``max_len`` columns, ending it with ``ellipsis`` when cut."""
    if max_len == 0:
        return ""
    text, length = utf8_truncate(text, max_len)
    if length > max_len:
        ellipsis_len = text_width(ellipsis)
        if max_len >= ellipsis_len:
            if ellipsis_len:
                text, _ = utf8_truncate(text, max_len - ellipsis_len)
            text += ellipsis
        else:
            text = ""
    return text


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def format_duration(microseconds: int) -> str:
    """Format a duration given in microseconds as ``HH:MM:SS``."""
    hours = _trunc_div(microseconds, _US_PER_HOUR)
    rest = microseconds - hours * _US_PER_HOUR
    minutes = _trunc_div(rest, _US_PER_MINUTE)
    rest -= minutes * _US_PER_MINUTE
    seconds = _trunc_div(rest, _US_PER_SECOND)
    return f"{hours:02}:{minutes:02}:{seconds:02}"


def icon_from_json(icons: Any, key: str) -> str:
    """Pick ``icons[key]``, else ``icons["default"]``, else an empty string."""
    if isinstance(icons, dict):
        value = icons.get(key)
        if isinstance(value, str):
            return value
        default = icons.get("default")
        if isinstance(default, str):
            return default
    return ""