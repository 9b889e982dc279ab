# sizing/validators.py

from __future__ import annotations

import math
from typing import Mapping, Optional


def to_number(v) -> Optional[float]:
    """Parse v to a finite float, or None if it isn't one."""
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, str):
        v = v.strip()
        if not v:
            return None
    try:
        out = float(v)
    except (TypeError, ValueError):
        return None
    return out if math.isfinite(out) else None


def is_valid_number(v) -> bool:
    return to_number(v) is not None


def is_positive_number(v) -> bool:
    n = to_number(v)
    return n is not None and n > 0


def is_percentage(v) -> bool:
    n = to_number(v)
    return n is not None and 0 <= n <= 100


def validate_inputs(inputs: Mapping[str, object]) -> bool:
    """True if every value is a valid number. Sign and range are not checked."""
    return all(is_valid_number(v) for v in inputs.values())


def parse_max_positions(v) -> Optional[int]:
    """
    Position-count limit, or None when not applicable.
    Fractional counts truncate (2.9 -> 2); anything below 1 is not applicable.
    """
    n = to_number(v)
    if n is None:
        return None
    count = int(n)
    return count if count > 0 else None
