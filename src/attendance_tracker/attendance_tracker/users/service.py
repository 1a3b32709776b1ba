from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import REGISTRATION_MESSAGE
from ..core.enums import Role
from .identity import derive_employee_id, derive_name, normalize_key, to_title_case
from .model import AdminSession, EmployeeProfile, EmployeeSession, LoggedOut, LoginResult, Session
from .repository import DirectoryRepository

logger = logging.getLogger(__name__)


class SessionManager:
    """Use case: login / registration / logout for the single active user.

    Passwords are accepted but never checked here; credential acceptance is the
    caller's job. None of the operations raise.
    """

    def __init__(self, directory: DirectoryRepository):
        self._directory = directory
        self._session: Session = LoggedOut()
        self._flash_message: Optional[str] = None

    @property
    def session(self) -> Session:
        return self._session

    @property
    def flash_message(self) -> Optional[str]:
        return self._flash_message

    @property
    def current_employee(self) -> Optional[EmployeeProfile]:
        if isinstance(self._session, EmployeeSession):
            return self._session.employee
        return None

    def resolve_profile(self, credential: str) -> EmployeeProfile:
        """Return the directory entry for a credential, creating it on first sight."""
        key = normalize_key(credential)
        profile = self._directory.get(key)
        if profile is None:
            profile = EmployeeProfile(id=derive_employee_id(credential), name=derive_name(credential))
            self._directory.put(key, profile)
            logger.info("Created profile %s for a new credential", profile.id)
        return profile

    def login(self, credential: str, password: str, role: Role) -> LoginResult:
        self._flash_message = None

        if role == Role.ADMIN:
            self._session = AdminSession()
            logger.info("Admin session started")
            return LoginResult(role=Role.ADMIN)

        profile = self.resolve_profile(credential)
        self._session = EmployeeSession(employee=profile)
        logger.info("Employee session started for %s", profile.id)
        return LoginResult(role=Role.EMPLOYEE)

    def register_account(
        self,
        *,
        name: str,
        credential: str,
        password: str,
        role: Role,
        employee_id: Optional[str] = None,
    ) -> None:
        preferred_name = to_title_case(name.strip() or derive_name(credential))
        preferred_id = (employee_id or "").strip().upper() or derive_employee_id(credential)

        if role == Role.EMPLOYEE:
            self._directory.put(normalize_key(credential), EmployeeProfile(id=preferred_id, name=preferred_name))
            logger.info("Registered employee %s", preferred_id)

        self._flash_message = REGISTRATION_MESSAGE.format(name=preferred_name)

    def logout(self) -> None:
        if not isinstance(self._session, LoggedOut):
            logger.info("Session closed")
        self._session = LoggedOut()

    def clear_flash_message(self) -> None:
        self._flash_message = None
