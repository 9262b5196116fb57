"""Textual representation of JSON leaf values inside difference details."""

from __future__ import annotations

import math
from typing import Any

__all__ = ["format_scalar"]

# Integral floats at or above this magnitude keep exponent notation.
_EXPONENT_THRESHOLD = 1e21


def format_scalar(value: Any) -> str:
    """Render a leaf value the way it appears in ``(<a> != <b>)``.

    Strings are emitted verbatim (no quotes), booleans and null use their
    JSON spelling, and integral floats drop the fractional part so that
    ``1.0`` and ``1`` print alike.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
            return str(int(value))
        return repr(value)
    return str(value)
