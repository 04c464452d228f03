from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ...core.constants import MINUTES_PER_HOUR, NIGHT_PREMIUM
from .base import WageCalculator


class NightPremiumWageCalculator(WageCalculator):
    """Split-rate rule: normal minutes at the base rate, night minutes at rate x premium.

    The total is rounded once, half away from zero, to a whole currency unit.
    """

    def __init__(self, *, premium: Decimal = NIGHT_PREMIUM, rounding: str = ROUND_HALF_UP):
        self._premium = Decimal(premium)
        self._rounding = rounding

    def wage(self, *, net_minutes: int, night_minutes: int, hourly_rate: int) -> int:
        rate = Decimal(hourly_rate)
        normal_minutes = Decimal(net_minutes - night_minutes)
        amount = (normal_minutes * rate + Decimal(night_minutes) * rate * self._premium) / MINUTES_PER_HOUR
        return int(amount.quantize(Decimal(1), rounding=self._rounding))
