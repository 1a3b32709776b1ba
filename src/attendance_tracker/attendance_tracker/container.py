from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .attendance.model import AttendanceRecord
from .attendance.repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .data.seed import SEEDED_RECORDS
from .metrics.calculator.standard_calculator import StandardWorkedTimeCalculator
from .metrics.service import MetricsService
from .users.repository import InMemoryDirectory
from .users.service import SessionManager


@dataclass(frozen=True)
class Container:
    """All engine state for one application instance."""

    directory: InMemoryDirectory
    attendance_repo: InMemoryAttendanceRepository

    session_manager: SessionManager
    attendance_service: AttendanceService
    metrics_service: MetricsService


def build_container(*, seed_records: Optional[Iterable[AttendanceRecord]] = None) -> Container:
    directory = InMemoryDirectory()
    attendance_repo = InMemoryAttendanceRepository(SEEDED_RECORDS if seed_records is None else seed_records)
    calculator = StandardWorkedTimeCalculator()

    session_manager = SessionManager(directory)
    attendance_service = AttendanceService(attendance_repo, session_manager, calculator=calculator)
    metrics_service = MetricsService(attendance_repo, calculator=calculator)

    return Container(
        directory=directory,
        attendance_repo=attendance_repo,
        session_manager=session_manager,
        attendance_service=attendance_service,
        metrics_service=metrics_service,
    )
