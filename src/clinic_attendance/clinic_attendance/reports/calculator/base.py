from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class HoursDiff:
    hours_worked: float = 0.0
    overtime: float = 0.0
    undertime: float = 0.0

    def to_dict(self) -> dict:
        return {"hoursWorked": self.hours_worked, "overtime": self.overtime, "undertime": self.undertime}


class OvertimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked hours)."""

    @abstractmethod
    def diff(self, check_in: Optional[str], check_out: Optional[str], standard_hours: Optional[float]) -> HoursDiff:
        raise NotImplementedError
