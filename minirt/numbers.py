"""Lenient number parsing for scene-file fields."""

from __future__ import annotations

_INT_SPACE = " \f\n\r\t\v"
_DIGITS = "0123456789"


def _digits_prefix(text: str, start: int) -> int:
    end = start
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return end


def parse_float(text: str) -> float:
    """Parse a leading decimal number, stopping at the first unexpected character.

    Leading spaces and one sign are accepted; no exponent. Text without
    digits yields zero.
    """
    i = 0
    while i < len(text) and text[i] == " ":
        i += 1
    sign = 1.0
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1.0
        i += 1
    end = _digits_prefix(text, i)
    whole = text[i:end]
    fraction = ""
    if end < len(text) and text[end] == ".":
        frac_end = _digits_prefix(text, end + 1)
        fraction = text[end + 1:frac_end]
    res = float(int(whole + fraction)) if whole + fraction else 0.0
    return sign * res / (10.0 ** len(fraction))


def parse_int(text: str) -> int:
    """Parse a leading integer the way C's atoi does, wrapping to 32 bits."""
    stripped = text.lstrip(_INT_SPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    end = _digits_prefix(stripped, 0)
    value = sign * int(stripped[:end]) if end else 0
    value &= 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value