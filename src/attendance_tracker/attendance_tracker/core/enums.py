from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role tag handed over by the credential-acceptance step."""

    ADMIN = "admin"
    EMPLOYEE = "employee"
