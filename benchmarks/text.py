"""Text formatting helpers shared by chart tooltips."""

from __future__ import annotations

import math
from decimal import Decimal

ELLIPSIS = "…"

# JavaScript prints numbers in this magnitude range without an exponent.
JS_MIN_PLAIN = 1e-6
JS_MAX_PLAIN = 1e21


def truncate(text: str, *, length: int = 30, omission: str = "...") -> str:
    """Truncate text to at most `length` characters.

    Text that already fits is returned unchanged. Otherwise the text is cut at
    a character boundary and `omission` is appended so the result is exactly
    `length` characters long.

    Args:
        text: Input text.
        length: Maximum length of the result, omission included.
        omission: Marker appended to truncated text.

    Returns:
        The possibly truncated text.
    """

    if len(text) <= length:
        return text
    keep = max(length - len(omission), 0)
    return text[:keep] + omission


def format_number(value: float) -> str:
    """Format a number the way Chart.js prints a point value.

    Follows JavaScript's Number-to-string rules: plain decimals for
    1e-6 <= |value| < 1e21 (12.0 -> "12", 0.00001 -> "0.00001"), exponent
    form otherwise with no padded exponent digits (1.5e-7 -> "1.5e-7",
    1e21 -> "1e+21").
    """

    if not isinstance(value, float):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if JS_MIN_PLAIN <= abs(value) < JS_MAX_PLAIN:
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    mantissa, _, exponent = repr(value).partition("e")
    power = int(exponent)
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"
