"""Example: drive the engine through the service layer (no Flask).

Controllers are a thin layer; the attendance rules live in the services.
"""

from src.attendance_tracker.attendance_tracker.container import build_container
from src.attendance_tracker.attendance_tracker.core.enums import Role
from src.attendance_tracker.attendance_tracker.metrics.service import compute_stats


def main():
    container = build_container()

    container.session_manager.login("luis.perez@acme.io", "pw", Role.EMPLOYEE)
    container.attendance_service.register_check_in("2025-11-03T08:30:00")
    container.attendance_service.register_check_out("2025-11-03T17:00:00")

    employee = container.session_manager.current_employee
    print(container.attendance_service.get_history_ui(employee.id))
    print(compute_stats(container.attendance_service.list_records()))


if __name__ == "__main__":
    main()
