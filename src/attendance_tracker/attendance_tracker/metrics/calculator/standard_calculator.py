from __future__ import annotations

import math
from typing import Optional

from ...common.datetime_utils import parse_iso_instant
from .base import WorkedTimeCalculator


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going towards +infinity."""
    return math.floor(value + 0.5)


class StandardWorkedTimeCalculator(WorkedTimeCalculator):
    """Standard rule: out - in, rounded to the minute; None when not positive."""

    def worked_minutes(self, check_in: Optional[str], check_out: Optional[str]) -> Optional[int]:
        if not check_out:
            return None

        start = parse_iso_instant(check_in)
        end = parse_iso_instant(check_out)
        if start is None or end is None:
            return None

        seconds = (end - start).total_seconds()
        if seconds <= 0:
            return None
        return round_half_up(seconds / 60)
