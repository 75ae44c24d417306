"""Text escaping and scalar stringification for HTML output."""

from __future__ import annotations

import math
import re
from typing import Any

_ESCAPE_CODES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#39;"}
_ESCAPE_RE = re.compile(r"[&<>\"']")


def escape(text: str) -> str:
    """Replace ``& < > " '`` with their HTML entities.

    Escaping is not idempotent: ``&`` inside an existing entity is escaped
    again.
    """
    if not isinstance(text, str):
        raise TypeError(f"escape() expects a string, got {type(text).__name__}")
    return _ESCAPE_RE.sub(lambda match: _ESCAPE_CODES[match.group(0)], text)


def _float_to_str(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    # Shortest round-trip digits from repr, laid out like JS Number#toString.
    sign = "-" if value < 0 else ""
    mantissa, _, exp_text = repr(abs(value)).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    combined = int_part + frac_part
    digits = combined.lstrip("0")
    point = len(int_part) + int(exp_text or 0) - (len(combined) - len(digits))
    digits = digits.rstrip("0")
    count = len(digits)

    if count <= point <= 21:
        return sign + digits + "0" * (point - count)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits
    exponent = point - 1
    exp_str = f"e+{exponent}" if exponent >= 0 else f"e-{-exponent}"
    if count == 1:
        return sign + digits + exp_str
    return sign + digits[0] + "." + digits[1:] + exp_str


def scalar_to_str(value: Any) -> str:
    """Literal string form of a scalar, e.g. ``True`` -> ``"true"``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_to_str(value)
    return str(value)


__all__ = ["escape", "scalar_to_str"]
