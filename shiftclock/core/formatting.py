# shiftclock/core/formatting.py
# Pure formatting & rounding helpers for durations, money & timestamps

from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP

from .constants import SECONDS_PER_HOUR

_CENTS = Decimal("0.01")


# * Round to nearest whole second, halves away from zero (not banker's rounding)
def round_seconds(seconds: float) -> int:
    return int(math.floor(seconds + 0.5))


# * Round money to cents, halves up
def round_cents(amount: float) -> float:
    return float(Decimal(repr(amount)).quantize(_CENTS, rounding=ROUND_HALF_UP))


# * Unrounded earnings for a duration at an hourly rate
def earned_for(seconds: float, wage: float) -> float:
    return seconds / SECONDS_PER_HOUR * (wage or 0.0)


# * Earnings rounded to cents (stored on shift records)
def amount_for(seconds: float, wage: float) -> float:
    return round_cents(earned_for(seconds, wage))


# * Zero-padded HH:MM:SS; hours widen past two digits when needed
def format_hms(seconds: float) -> str:
    total = int(max(0.0, seconds))
    h = total // SECONDS_PER_HOUR
    m = (total % SECONDS_PER_HOUR) // 60
    s = total % 60
    return f"{h:02d}:{m:02d}:{s:02d}"


# exactly two decimals, as used in exports
def format_fixed2(value: float) -> str:
    return f"{value:.2f}"


def format_money(amount: float) -> str:
    return f"${amount or 0:,.2f}"


def format_rate(wage: float) -> str:
    return f"${wage:.2f}/hr"


# * UTC ISO-8601 w/ millisecond precision & Z suffix
def iso_timestamp(epoch: float) -> str:
    dt = datetime.fromtimestamp(epoch, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# * Render stored timestamp in the host's local timezone
def local_time(timestamp: str) -> str:
    try:
        dt = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    return dt.astimezone().strftime("%Y-%m-%d %H:%M:%S")
