from __future__ import annotations

from typing import Optional, Protocol

from .model import EmployeeProfile


class DirectoryRepository(Protocol):
    """Identity key -> profile mapping.

    Note (DIP): the session layer depends on this interface, not on a concrete store.
    """

    def get(self, key: str) -> Optional[EmployeeProfile]:
        raise NotImplementedError

    def put(self, key: str, profile: EmployeeProfile) -> None:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError


class InMemoryDirectory:
    """Process-local directory. Entries are only ever added or overwritten."""

    def __init__(self, entries: Optional[dict[str, EmployeeProfile]] = None):
        self._by_key: dict[str, EmployeeProfile] = dict(entries or {})

    def get(self, key: str) -> Optional[EmployeeProfile]:
        return self._by_key.get(key)

    def put(self, key: str, profile: EmployeeProfile) -> None:
        self._by_key[key] = profile

    def __len__(self) -> int:
        return len(self._by_key)
