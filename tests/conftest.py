from __future__ import annotations

import pytest

from src.attendance_tracker.attendance_tracker.attendance.repository import InMemoryAttendanceRepository
from src.attendance_tracker.attendance_tracker.attendance.service import AttendanceService
from src.attendance_tracker.attendance_tracker.users.repository import InMemoryDirectory
from src.attendance_tracker.attendance_tracker.users.service import SessionManager


@pytest.fixture
def directory():
    return InMemoryDirectory()


@pytest.fixture
def sessions(directory):
    return SessionManager(directory)


@pytest.fixture
def attendance_repo():
    return InMemoryAttendanceRepository()


@pytest.fixture
def attendance_service(attendance_repo, sessions):
    return AttendanceService(attendance_repo, sessions)


@pytest.fixture
def app():
    from src.attendance_tracker.attendance_tracker.main import create_app

    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()
