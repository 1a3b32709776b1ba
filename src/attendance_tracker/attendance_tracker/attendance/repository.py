from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: str, work_date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def save(self, record: AttendanceRecord) -> None:
        """Insert or replace the record stored for (employee_id, work_date)."""

        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError


class InMemoryAttendanceRepository:
    """Record store keyed by (employee_id, calendar date).

    Replacing a record keeps its original position, so listing order is the
    order in which days were first recorded.
    """

    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._by_employee_date: dict[tuple[str, str], AttendanceRecord] = {}
        for record in records:
            self.save(record)

    def get_for_employee_and_date(self, employee_id: str, work_date: str) -> Optional[AttendanceRecord]:
        return self._by_employee_date.get((employee_id, work_date))

    def save(self, record: AttendanceRecord) -> None:
        self._by_employee_date[(record.employee_id, record.work_date)] = record

    def list_all(self) -> Sequence[AttendanceRecord]:
        return list(self._by_employee_date.values())

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._by_employee_date.values() if r.employee_id == employee_id]

    def __len__(self) -> int:
        return len(self._by_employee_date)
