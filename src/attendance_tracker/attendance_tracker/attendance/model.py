from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def build_record_id(employee_id: str, timestamp: str) -> str:
    """Natural key shown to users: employee id plus the calendar date."""
    return f"{employee_id}-{timestamp[:10]}"


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance entry for one employee on one calendar day.

    Timestamps stay as the ISO-8601 strings the caller supplied.
    """

    record_id: str
    employee_id: str
    name: str
    check_in: str
    check_out: Optional[str] = None

    @property
    def work_date(self) -> str:
        return self.check_in[:10]

    @property
    def is_open(self) -> bool:
        return self.check_out is None


@dataclass(frozen=True)
class EmployeeSummary:
    """Read-model for the employee attendance page."""

    last_check_in: str
    last_check_out: str
    estimated_duration: str
    open_records: int
    has_open_record: bool
