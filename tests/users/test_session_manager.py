from src.attendance_tracker.attendance_tracker.core.enums import Role
from src.attendance_tracker.attendance_tracker.users.model import (
    AdminSession,
    EmployeeProfile,
    EmployeeSession,
    LoggedOut,
)


def test_starts_logged_out(sessions):
    assert isinstance(sessions.session, LoggedOut)
    assert sessions.session.role is None
    assert sessions.current_employee is None
    assert sessions.flash_message is None


def test_admin_login_does_not_touch_directory(sessions, directory):
    result = sessions.login("boss@acme.io", "secret", Role.ADMIN)

    assert result.role == Role.ADMIN
    assert isinstance(sessions.session, AdminSession)
    assert sessions.current_employee is None
    assert len(directory) == 0


def test_employee_login_derives_profile(sessions, directory):
    result = sessions.login("ana.martinez@acme.io", "pw", Role.EMPLOYEE)

    assert result.role == Role.EMPLOYEE
    assert sessions.session == EmployeeSession(employee=EmployeeProfile(id="EMP-ANAMAR", name="Ana Martinez"))
    assert directory.get("ana.martinez@acme.io") == sessions.current_employee


def test_login_is_idempotent_across_logouts_and_other_users(sessions):
    sessions.login("ana.martinez@acme.io", "pw", Role.EMPLOYEE)
    first = sessions.current_employee

    sessions.logout()
    sessions.login("luis@acme.io", "pw", Role.EMPLOYEE)
    sessions.login("boss@acme.io", "pw", Role.ADMIN)
    sessions.login("  ANA.martinez@acme.io ", "other", Role.EMPLOYEE)

    assert sessions.current_employee is first


def test_directory_entry_wins_over_derivation(sessions, directory):
    directory.put("ana@acme.io", EmployeeProfile(id="EMP-777", name="Ana Custom"))

    sessions.login("Ana@acme.io", "pw", Role.EMPLOYEE)

    assert sessions.current_employee == EmployeeProfile(id="EMP-777", name="Ana Custom")


def test_register_then_login_uses_registered_profile(sessions):
    sessions.register_account(
        name="  maria garcia ",
        credential="mg@acme.io",
        password="pw",
        role=Role.EMPLOYEE,
        employee_id=" emp-042 ",
    )
    sessions.login("mg@acme.io", "pw", Role.EMPLOYEE)

    assert sessions.current_employee == EmployeeProfile(id="EMP-042", name="Maria Garcia")


def test_register_overwrites_existing_entry(sessions):
    sessions.login("mg@acme.io", "pw", Role.EMPLOYEE)
    assert sessions.current_employee.id == "EMP-MG0000"

    sessions.register_account(name="Maria", credential="MG@acme.io", password="pw", role=Role.EMPLOYEE)
    sessions.login("mg@acme.io", "pw", Role.EMPLOYEE)

    assert sessions.current_employee == EmployeeProfile(id="EMP-MG0000", name="Maria")


def test_register_falls_back_to_derived_values(sessions):
    sessions.register_account(name="   ", credential="john_smith@acme.io", password="pw", role=Role.EMPLOYEE)
    sessions.login("john_smith@acme.io", "pw", Role.EMPLOYEE)

    assert sessions.current_employee == EmployeeProfile(id="EMP-JOHNSM", name="John Smith")


def test_register_sets_flash_and_keeps_session(sessions):
    sessions.login("boss@acme.io", "pw", Role.ADMIN)

    sessions.register_account(name="maria", credential="maria@acme.io", password="pw", role=Role.EMPLOYEE)

    assert sessions.flash_message == "Registration successful for Maria. Sign in to get started."
    assert isinstance(sessions.session, AdminSession)


def test_register_admin_does_not_create_directory_entry(sessions, directory):
    sessions.register_account(name="Root", credential="root@acme.io", password="pw", role=Role.ADMIN)

    assert len(directory) == 0
    assert "Root" in sessions.flash_message


def test_login_clears_flash_message(sessions):
    sessions.register_account(name="Ana", credential="ana@acme.io", password="pw", role=Role.EMPLOYEE)
    assert sessions.flash_message is not None

    sessions.login("ana@acme.io", "pw", Role.EMPLOYEE)

    assert sessions.flash_message is None


def test_clear_flash_message(sessions):
    sessions.register_account(name="Ana", credential="ana@acme.io", password="pw", role=Role.EMPLOYEE)

    sessions.clear_flash_message()

    assert sessions.flash_message is None


def test_logout_is_idempotent(sessions):
    sessions.logout()
    sessions.login("ana@acme.io", "pw", Role.EMPLOYEE)
    sessions.logout()
    sessions.logout()

    assert isinstance(sessions.session, LoggedOut)
