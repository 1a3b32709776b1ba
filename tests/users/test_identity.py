import re

import pytest

from src.attendance_tracker.attendance_tracker.core.enums import Role
from src.attendance_tracker.attendance_tracker.users.identity import (
    derive_employee_id,
    derive_name,
    home_route_for_role,
    normalize_key,
    to_title_case,
)


@pytest.mark.parametrize(
    "credential",
    ["ana.martinez@acme.io", "x@y", "", "@nobody", "  spaced name@host ", "josé.pérez@acme.es", "no-at-sign"],
)
def test_employee_id_shape(credential):
    employee_id = derive_employee_id(credential)
    assert len(employee_id) == 10
    assert employee_id.startswith("EMP-")
    assert re.fullmatch(r"[A-Z0-9]{6}", employee_id[4:])


def test_employee_id_takes_first_six_alphanumerics():
    assert derive_employee_id("ana.martinez@acme.io") == "EMP-ANAMAR"


def test_employee_id_pads_short_local_part():
    assert derive_employee_id("jo@acme.io") == "EMP-JO0000"
    assert derive_employee_id("@acme.io") == "EMP-000000"


def test_employee_id_without_at_uses_whole_string():
    assert derive_employee_id("b_2") == "EMP-B20000"


def test_derive_name_splits_separators_and_drops_digits():
    assert derive_name("ana.martinez@acme.io") == "Ana Martinez"
    assert derive_name("john_smith42@acme.io") == "John Smith"


def test_derive_name_keeps_accented_letters():
    assert derive_name("josé.pérez@acme.es") == "José Pérez"


def test_derive_name_placeholders():
    # digits only: the cleaned string is empty
    assert derive_name("12345@acme.io") == "Employee"
    # no letters but not empty
    assert derive_name("-+-@acme.io") == "Collaborator"


def test_derive_name_only_strips_ascii_digits():
    # Arabic-Indic digit three is neither an ASCII digit nor a letter
    assert derive_name("\u0663@acme.io") == "Collaborator"
    assert derive_name("ana\u0663lopez@acme.io") == "Ana Lopez"


def test_title_case_only_forces_word_starts():
    assert to_title_case("MARIA_GARCIA") == "MARIA GARCIA"
    assert to_title_case("mcDonald o'neil") == "McDonald O Neil"


def test_title_case_empty_input():
    assert to_title_case("") == "Employee"


def test_normalize_key():
    assert normalize_key("  Ana.Martinez@ACME.io \n") == "ana.martinez@acme.io"


def test_home_route_for_role():
    assert home_route_for_role(Role.ADMIN) == "/dashboard"
    assert home_route_for_role(Role.EMPLOYEE) == "/employee"
