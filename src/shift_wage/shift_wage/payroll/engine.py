"""Public entry points of the wage engine.

Pure functions: no I/O, no logging, no state kept between calls.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..common.validators import require_non_negative_int
from ..core.exceptions import InvalidInterval
from ..intervals.model import Interval
from .calculator.base import WageCalculator
from .calculator.night_premium_calculator import NightPremiumWageCalculator
from .model import ShiftInput, ShiftResult
from .shift_calculator import compute_shift_minutes
from .totals import compute_totals

__all__ = ["compute_shift", "compute_shift_input", "compute_totals"]

_DEFAULT_CALCULATOR = NightPremiumWageCalculator()


def _require_interval(value, name: str) -> Interval:
    if not isinstance(value, Interval):
        raise InvalidInterval(f"{name} không phải khoảng thời gian hợp lệ", field=name)
    return value


def compute_shift(
    work: Interval,
    breaks: Iterable[Interval],
    hourly_rate: int,
    *,
    calculator: Optional[WageCalculator] = None,
) -> ShiftResult:
    work = _require_interval(work, "work")
    breaks = tuple(_require_interval(b, f"breaks[{i}]") for i, b in enumerate(breaks))
    rate = require_non_negative_int(hourly_rate, "hourly_rate")

    minutes = compute_shift_minutes(work, breaks)
    wage = (calculator or _DEFAULT_CALCULATOR).wage(
        net_minutes=minutes.net_minutes,
        night_minutes=minutes.night_minutes,
        hourly_rate=rate,
    )
    return ShiftResult(net_minutes=minutes.net_minutes, night_minutes=minutes.night_minutes, wage=wage)


def compute_shift_input(shift: ShiftInput, *, calculator: Optional[WageCalculator] = None) -> ShiftResult:
    return compute_shift(shift.work, shift.breaks, shift.hourly_rate, calculator=calculator)
