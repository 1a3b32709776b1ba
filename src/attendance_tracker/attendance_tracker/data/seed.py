from __future__ import annotations

from ..attendance.model import AttendanceRecord

SEEDED_RECORDS: tuple[AttendanceRecord, ...] = (
    AttendanceRecord(
        record_id="EMP-001-2025-11-03",
        employee_id="EMP-001",
        name="Ana Martínez",
        check_in="2025-11-03T08:54:00",
        check_out="2025-11-03T17:12:00",
    ),
)
