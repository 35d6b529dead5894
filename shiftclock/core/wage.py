# shiftclock/core/wage.py
# Hourly wage parsing & validation rules

from __future__ import annotations

import math
from typing import Any

from .constants import WAGE_NEGATIVE_TOLERANCE
from .exceptions import InvalidWageError


# * Parse user-entered wage; raise InvalidWageError for non-numeric, non-finite or too-negative input
def parse_wage(raw: Any) -> float:
    if isinstance(raw, bool):
        raise InvalidWageError("Please enter a valid hourly wage.", raw)
    try:
        value = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError):
        raise InvalidWageError("Please enter a valid hourly wage.", raw)

    if not math.isfinite(value) or value <= WAGE_NEGATIVE_TOLERANCE:
        raise InvalidWageError("Please enter a valid hourly wage.", raw)
    return value


# * Lenient parse of a persisted wage; anything unusable loads as 0
def load_wage(raw: str | None) -> float:
    if raw is None:
        return 0.0
    try:
        value = float(raw)
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


# * A shift can only start w/ a strictly positive wage
def can_start_with(wage: float) -> bool:
    return wage > 0
