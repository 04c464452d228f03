from __future__ import annotations

from datetime import datetime

import pytest

from shift_wage.core.exceptions import InvalidInterval, InvalidRate
from shift_wage.intervals.model import Interval
from shift_wage.payroll.calculator.base import WageCalculator
from shift_wage.payroll.engine import compute_shift, compute_shift_input
from shift_wage.payroll.model import ShiftInput, ShiftResult


def at(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2025, 10, day, hour, minute)


@pytest.mark.parametrize(
    "work, breaks, rate, expected",
    [
        # Day shift with lunch
        ((at(10, 9), at(10, 18)), [(at(10, 12), at(10, 13))], 1200, ShiftResult(480, 0, 9600)),
        # Whole night window
        ((at(10, 22), at(11, 5)), [], 1000, ShiftResult(420, 420, 8750)),
        # Evening into night
        ((at(10, 20), at(11, 1)), [], 1000, ShiftResult(300, 180, 5750)),
        # Night shift with a break at midnight
        ((at(10, 22), at(11, 6)), [(at(11, 0), at(11, 1))], 1000, ShiftResult(420, 360, 8500)),
        # Early morning out of the previous night's window
        ((at(10, 3), at(10, 9)), [], 1000, ShiftResult(360, 120, 6500)),
    ],
)
def test_reference_scenarios(work, breaks, rate, expected):
    result = compute_shift(Interval(*work), [Interval(*b) for b in breaks], rate)

    assert result == expected


def test_no_breaks_means_net_equals_duration():
    work = Interval(at(10, 13), at(11, 2, 45))

    result = compute_shift(work, [], 1000)

    assert result.net_minutes == work.duration_minutes
    assert 0 <= result.night_minutes <= result.net_minutes


def test_same_inputs_same_output():
    work = Interval(at(10, 20), at(11, 4))
    breaks = [Interval(at(10, 23), at(10, 23, 45))]

    assert compute_shift(work, breaks, 1100) == compute_shift(work, breaks, 1100)


def test_breaks_accept_any_iterable():
    work = Interval(at(10, 9), at(10, 18))
    breaks = (b for b in [Interval(at(10, 12), at(10, 13))])

    assert compute_shift(work, breaks, 1000).net_minutes == 480


@pytest.mark.parametrize("rate", [-1, 10.5, "1000", True, None])
def test_invalid_rate(rate):
    with pytest.raises(InvalidRate) as exc:
        compute_shift(Interval(at(10, 9), at(10, 18)), [], rate)

    assert exc.value.field == "hourly_rate"


def test_non_interval_break_is_reported_by_position():
    with pytest.raises(InvalidInterval) as exc:
        compute_shift(Interval(at(10, 9), at(10, 18)), [Interval(at(10, 12), at(10, 13)), (at(10, 15), at(10, 16))], 1000)

    assert exc.value.field == "breaks[1]"


def test_zero_rate_gives_zero_wage():
    result = compute_shift(Interval(at(10, 22), at(11, 5)), [], 0)

    assert result == ShiftResult(420, 420, 0)


def test_custom_calculator_is_used():
    class FlatCalculator(WageCalculator):
        def wage(self, *, net_minutes: int, night_minutes: int, hourly_rate: int) -> int:
            return net_minutes * hourly_rate // 60

    result = compute_shift(Interval(at(10, 22), at(11, 5)), [], 1000, calculator=FlatCalculator())

    assert result.wage == 7000


def test_compute_from_shift_input():
    shift = ShiftInput(
        work=Interval(at(10, 9), at(10, 18)),
        breaks=(Interval(at(10, 12), at(10, 13)),),
        hourly_rate=1200,
    )

    assert compute_shift_input(shift) == ShiftResult(480, 0, 9600)
