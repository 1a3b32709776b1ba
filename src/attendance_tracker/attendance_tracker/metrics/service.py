from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from .calculator.base import WorkedTimeCalculator
from .calculator.standard_calculator import StandardWorkedTimeCalculator, round_half_up
from .formatting import format_average_hours, format_average_minutes, minutes_from_timestamp


@dataclass(frozen=True)
class DashboardStats:
    average_entry: str
    average_exit: str
    average_worked: str
    pending_check_outs: int


@dataclass(frozen=True)
class DashboardData:
    stats: DashboardStats
    records: list[AttendanceRecord]
    employee_ids: list[str]


def average_minutes(values: Iterable[Optional[int]]) -> Optional[int]:
    valid = [v for v in values if v is not None]
    if not valid:
        return None
    return round_half_up(sum(valid) / len(valid))


def compute_stats(
    records: Sequence[AttendanceRecord],
    *,
    calculator: Optional[WorkedTimeCalculator] = None,
) -> DashboardStats:
    """Aggregate punctuality metrics over any record set.

    Open records count towards the average entry but not towards the average
    exit or worked time.
    """
    calculator = calculator or StandardWorkedTimeCalculator()

    average_entry = average_minutes(minutes_from_timestamp(r.check_in) for r in records)
    average_exit = average_minutes(minutes_from_timestamp(r.check_out) for r in records)
    average_worked = average_minutes(calculator.worked_minutes(r.check_in, r.check_out) for r in records)

    return DashboardStats(
        average_entry=format_average_minutes(average_entry),
        average_exit=format_average_minutes(average_exit),
        average_worked=format_average_hours(average_worked),
        pending_check_outs=sum(1 for r in records if r.check_out is None),
    )


class MetricsService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[WorkedTimeCalculator] = None,
    ):
        self._attendance = attendance
        self._calculator = calculator or StandardWorkedTimeCalculator()

    def dashboard(self, *, employee_id: Optional[str] = None) -> DashboardData:
        all_records = self._attendance.list_all()

        employee_ids: list[str] = []
        for r in all_records:
            if r.employee_id not in employee_ids:
                employee_ids.append(r.employee_id)

        relevant = [r for r in all_records if employee_id is None or r.employee_id == employee_id]
        relevant.sort(key=lambda r: r.check_in, reverse=True)

        return DashboardData(
            stats=compute_stats(relevant, calculator=self._calculator),
            records=relevant,
            employee_ids=employee_ids,
        )
