from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.constants import SECONDS_PER_MINUTE
from ..core.exceptions import InvalidInterval


def _require_minute_aligned(value: datetime, name: str) -> None:
    if value.second or value.microsecond:
        raise InvalidInterval(f"{name} phải tròn phút: {value.isoformat()}", field=name)


@dataclass(frozen=True)
class Interval:
    """Half-open time span ``[start, end)`` with minute resolution.

    ``name`` identifies the input field the span came from (``work``,
    ``breaks[0]``...) so validation errors can point at it. It does not take
    part in equality.
    """

    start: datetime
    end: datetime
    name: str = field(default="interval", compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.start.tzinfo is not None or self.end.tzinfo is not None:
            raise InvalidInterval(f"{self.name}: không hỗ trợ múi giờ", field=self.name)
        _require_minute_aligned(self.start, self.name)
        _require_minute_aligned(self.end, self.name)
        if self.start >= self.end:
            raise InvalidInterval(
                f"{self.name}: thời điểm bắt đầu phải trước thời điểm kết thúc "
                f"({self.start.isoformat()} >= {self.end.isoformat()})",
                field=self.name,
            )

    @property
    def duration_minutes(self) -> int:
        return int((self.end - self.start).total_seconds()) // SECONDS_PER_MINUTE

    def intersect(self, other: Interval) -> Optional[Interval]:
        """Overlap of two spans, or None. Touching spans do not intersect."""
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if start < end:
            return Interval(start, end, name=self.name)
        return None

    def clip(self, bound: Interval) -> Optional[Interval]:
        return self.intersect(bound)

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end

    def overlaps_or_touches(self, other: Interval) -> bool:
        return self.start <= other.end and other.start <= self.end


def overlap_minutes(a: Interval, b: Interval) -> int:
    common = a.intersect(b)
    return common.duration_minutes if common else 0
