from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class WorkedTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked-time rules)."""

    @abstractmethod
    def worked_minutes(self, check_in: Optional[str], check_out: Optional[str]) -> Optional[int]:
        raise NotImplementedError
