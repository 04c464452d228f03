from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction

from ..intervals.model import Interval


@dataclass(frozen=True)
class ShiftInput:
    """Thực thể miền (domain): dữ liệu đầu vào của một ca làm việc."""

    work: Interval
    breaks: tuple[Interval, ...]
    hourly_rate: int


@dataclass(frozen=True)
class ShiftMinutes:
    net_minutes: int
    night_minutes: int


@dataclass(frozen=True)
class ShiftResult:
    """Derived figures for one shift. Recomputed from inputs, never patched."""

    net_minutes: int
    night_minutes: int
    wage: int


@dataclass(frozen=True)
class Totals:
    count: int
    sum_net_minutes: int
    sum_night_minutes: int
    sum_wage: int

    @property
    def sum_hours(self) -> Fraction:
        return Fraction(self.sum_net_minutes, 60)

    @property
    def sum_hours_display(self) -> str:
        hours = Decimal(self.sum_hours.numerator) / Decimal(self.sum_hours.denominator)
        return str(hours.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

    def as_dict(self) -> dict:
        return {
            "count": self.count,
            "sum_net_minutes": self.sum_net_minutes,
            "sum_hours": self.sum_hours_display,
            "sum_night_minutes": self.sum_night_minutes,
            "sum_wage": self.sum_wage,
        }
