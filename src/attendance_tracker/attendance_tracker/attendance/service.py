from __future__ import annotations

import dataclasses
import logging
from typing import Optional, Sequence

from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..metrics.calculator.base import WorkedTimeCalculator
from ..metrics.calculator.standard_calculator import StandardWorkedTimeCalculator
from ..metrics.formatting import format_date, format_duration, format_time
from ..users.model import EmployeeProfile, EmployeeSession
from ..users.service import SessionManager
from .model import AttendanceRecord, EmployeeSummary, build_record_id
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: merge check-in/check-out events into one record per employee per day.

    Events are only recorded for an active employee session. Admin and
    logged-out callers are ignored without error.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        sessions: SessionManager,
        *,
        calculator: Optional[WorkedTimeCalculator] = None,
    ):
        self._attendance = attendance
        self._sessions = sessions
        self._calculator = calculator or StandardWorkedTimeCalculator()

    def _active_employee(self) -> Optional[EmployeeProfile]:
        session = self._sessions.session
        if isinstance(session, EmployeeSession):
            return session.employee
        return None

    def register_check_in(self, timestamp: str) -> None:
        employee = self._active_employee()
        if employee is None:
            logger.debug("Check-in ignored: no employee session")
            return

        existing = self._attendance.get_for_employee_and_date(employee.id, timestamp[:10])
        if existing:
            record = dataclasses.replace(existing, check_in=timestamp, name=employee.name)
        else:
            record = AttendanceRecord(
                record_id=build_record_id(employee.id, timestamp),
                employee_id=employee.id,
                name=employee.name,
                check_in=timestamp,
                check_out=None,
            )

        self._attendance.save(record)
        logger.info("Check-in %s at %s", record.record_id, timestamp)

    def register_check_out(self, timestamp: str) -> None:
        employee = self._active_employee()
        if employee is None:
            logger.debug("Check-out ignored: no employee session")
            return

        existing = self._attendance.get_for_employee_and_date(employee.id, timestamp[:10])
        if existing:
            record = dataclasses.replace(existing, check_out=timestamp, name=employee.name)
        else:
            # No check-in that day: recorded as a zero-length interval.
            record = AttendanceRecord(
                record_id=build_record_id(employee.id, timestamp),
                employee_id=employee.id,
                name=employee.name,
                check_in=timestamp,
                check_out=timestamp,
            )

        self._attendance.save(record)
        logger.info("Check-out %s at %s", record.record_id, timestamp)

    def list_records(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def get_history(self, employee_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> list[AttendanceRecord]:
        """Most recent records of one employee, newest check-in first."""
        rows = sorted(self._attendance.list_for_employee(employee_id), key=lambda r: r.check_in, reverse=True)
        return rows[:limit]

    def get_employee_summary(self, employee_id: str) -> EmployeeSummary:
        history = self.get_history(employee_id)
        latest = history[0] if history else None
        open_records = sum(1 for r in history if r.is_open)

        return EmployeeSummary(
            last_check_in=format_time(latest.check_in if latest else None),
            last_check_out=format_time(latest.check_out if latest else None),
            estimated_duration=format_duration(
                self._calculator.worked_minutes(latest.check_in, latest.check_out) if latest else None
            ),
            open_records=open_records,
            has_open_record=open_records > 0,
        )

    def get_history_ui(self, employee_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> list[dict]:
        return [self._to_ui(r) for r in self.get_history(employee_id, limit=limit)]

    def _to_ui(self, r: AttendanceRecord) -> dict:
        return {
            "record_id": r.record_id,
            "date": format_date(r.check_in),
            "check_in": format_time(r.check_in),
            "check_out": format_time(r.check_out),
            "duration": format_duration(self._calculator.worked_minutes(r.check_in, r.check_out)),
        }
