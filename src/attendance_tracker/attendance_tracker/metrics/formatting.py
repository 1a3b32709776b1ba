"""Display helpers shared by the dashboard and the employee history."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..common.datetime_utils import parse_iso_datetime
from ..core.constants import EMPTY_DURATION, EMPTY_TIME


def minutes_from_timestamp(value: Optional[str]) -> Optional[int]:
    """Minutes since local midnight, or None for absent/unparseable input."""
    parsed = parse_iso_datetime(value)
    if parsed is None:
        return None
    return parsed.hour * 60 + parsed.minute


def format_time(value: Optional[str]) -> str:
    parsed = parse_iso_datetime(value)
    if parsed is None:
        return EMPTY_TIME
    return parsed.strftime("%H:%M")


def format_date(value: str) -> str:
    parsed = parse_iso_datetime(value)
    if parsed is None:
        return value[:10]
    return parsed.strftime("%a %d %b")


def format_average_minutes(minutes: Optional[int]) -> str:
    if minutes is None:
        return EMPTY_TIME
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_average_hours(minutes: Optional[int]) -> str:
    if minutes is None:
        return EMPTY_DURATION
    # Exact binary value of the quotient, ties going up.
    hours = Decimal(minutes / 60).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{hours} h"


def format_duration(minutes: Optional[int]) -> str:
    if minutes is None:
        return EMPTY_DURATION
    return f"{minutes // 60}h {minutes % 60:02d}m"
