from __future__ import annotations

from abc import ABC, abstractmethod


class WageCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def wage(self, *, net_minutes: int, night_minutes: int, hourly_rate: int) -> int:
        raise NotImplementedError
