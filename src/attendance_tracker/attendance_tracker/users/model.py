from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..core.enums import Role


@dataclass(frozen=True)
class EmployeeProfile:
    """Stable identity of a person once resolved from a credential.

    Note: immutable; the directory hands out the same instance on every lookup.
    """

    id: str
    name: str


@dataclass(frozen=True)
class LoggedOut:
    """No active session."""

    @property
    def role(self) -> Optional[Role]:
        return None


@dataclass(frozen=True)
class AdminSession:
    @property
    def role(self) -> Optional[Role]:
        return Role.ADMIN


@dataclass(frozen=True)
class EmployeeSession:
    employee: EmployeeProfile

    @property
    def role(self) -> Optional[Role]:
        return Role.EMPLOYEE


Session = Union[LoggedOut, AdminSession, EmployeeSession]


@dataclass(frozen=True)
class LoginResult:
    role: Role
