from __future__ import annotations

import math
import re
from typing import Optional

# Distance from a whole number still accepted as "integer-valued" input.
WHOLE_NUMBER_TOLERANCE = 0.0001

# Floating point noise absorbed before truncating a curve value.
SNAP_EPSILON = 1e-9

# ASCII decimal with optional exponent; no underscores, no other scripts.
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_number(text: str) -> Optional[float]:
    """Parse text as a finite real number, returning None when it is not one.

    Only ASCII decimal notation is accepted ("1.5", "-2", "1e3"); surrounding
    whitespace is ignored. nan, infinities and results that overflow are
    rejected.
    """
    if not isinstance(text, str):
        return None
    text = text.strip()
    if not NUMBER_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def is_whole_number(value: float, tolerance: float = WHOLE_NUMBER_TOLERANCE) -> bool:
    return abs(value - math.trunc(value)) < tolerance


def parse_integer(text: str) -> Optional[int]:
    """Parse text as an integer-valued number.

    Accepts any real number whose fractional part is within
    WHOLE_NUMBER_TOLERANCE of zero, so "100.00001" gives 100.
    """
    value = parse_number(text)
    if value is None or not is_whole_number(value):
        return None
    return math.trunc(value)


def truncate(value: float) -> int:
    """Truncate a curve value toward zero.

    Values within SNAP_EPSILON of a whole number are taken as that number,
    so 135.99999999999997 gives 136 rather than 135.
    """
    nearest = round(value)
    if abs(value - nearest) < SNAP_EPSILON:
        return int(nearest)
    return math.trunc(value)
