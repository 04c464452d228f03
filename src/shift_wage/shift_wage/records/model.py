from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..common.datetime_utils import format_clock, format_us_date
from ..intervals.model import Interval
from ..payroll.model import ShiftResult


def hours_label(minutes: int) -> str:
    """Minutes as hours with at most two decimals: ``8``, ``7.58``."""
    hours = (Decimal(minutes) / 60).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return format(hours.normalize(), "f")


def _span_label(span: Interval) -> str:
    return f"{format_clock(span.start)} - {format_clock(span.end)}"


@dataclass(frozen=True)
class WorkRecord:
    """Thực thể miền (domain): Bản ghi ca làm việc đã tính lương.

    Input fields and derived fields are stored together as one row.
    """

    record_id: Optional[int]
    work: Interval
    breaks: tuple[Interval, ...]
    hourly_rate: int
    net_minutes: int
    night_minutes: int
    wage: int
    created_at: Optional[datetime] = None

    @property
    def result(self) -> ShiftResult:
        return ShiftResult(net_minutes=self.net_minutes, night_minutes=self.night_minutes, wage=self.wage)

    @property
    def work_date(self) -> str:
        return format_us_date(self.work.start)

    @property
    def time_label(self) -> str:
        return _span_label(self.work)

    @property
    def break_label(self) -> str:
        return " / ".join(_span_label(b) for b in self.breaks)

    @property
    def hours(self) -> str:
        return hours_label(self.net_minutes)

    def as_dict(self) -> dict:
        return {
            "id": self.record_id,
            "work_start": self.work.start.strftime("%Y-%m-%dT%H:%M"),
            "work_end": self.work.end.strftime("%Y-%m-%dT%H:%M"),
            "breaks": [
                {"start": b.start.strftime("%Y-%m-%dT%H:%M"), "end": b.end.strftime("%Y-%m-%dT%H:%M")}
                for b in self.breaks
            ],
            "hourly_rate": self.hourly_rate,
            "date": self.work_date,
            "time": self.time_label,
            "break_time": self.break_label,
            "hours": self.hours,
            "net_minutes": self.net_minutes,
            "night": self.night_minutes,
            "salary": self.wage,
            "created_at": self.created_at.strftime("%Y-%m-%dT%H:%M:%S") if self.created_at else None,
        }
