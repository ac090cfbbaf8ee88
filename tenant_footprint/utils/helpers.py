"""Shared helper functions.

Centralises parsing of free-text input from the tenant editing form.
"""

from __future__ import annotations

import math


def parse_size(text: object) -> float:
    """Parse a user-entered size into square feet.

    Args:
        text: The raw field value. Usually a string; numbers pass through.

    Returns:
        The parsed value, or ``0.0`` when the input is blank, not numeric,
        not finite or negative. Thousands separators (``"1,200"``) and
        surrounding whitespace are accepted.
    """
    if text is None or isinstance(text, bool):
        return 0.0
    if isinstance(text, (int, float)):
        value = float(text)
    else:
        cleaned = str(text).strip().replace(",", "").replace("_", "")
        if not cleaned:
            return 0.0
        try:
            value = float(cleaned)
        except ValueError:
            return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value
