from __future__ import annotations

from functools import reduce
from typing import Iterable

from .model import ShiftResult, Totals

EMPTY_TOTALS = Totals(count=0, sum_net_minutes=0, sum_night_minutes=0, sum_wage=0)


def _add(acc: Totals, r: ShiftResult) -> Totals:
    return Totals(
        count=acc.count + 1,
        sum_net_minutes=acc.sum_net_minutes + r.net_minutes,
        sum_night_minutes=acc.sum_night_minutes + r.night_minutes,
        sum_wage=acc.sum_wage + r.wage,
    )


def compute_totals(results: Iterable[ShiftResult]) -> Totals:
    """Sum integer minutes and wages; hours are derived from the minute sum."""
    return reduce(_add, results, EMPTY_TOTALS)
