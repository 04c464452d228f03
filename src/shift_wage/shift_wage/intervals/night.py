from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.constants import NIGHT_END, NIGHT_START
from .model import Interval


def night_window_for(day: date) -> Interval:
    """Night window anchored at ``day``: 22:00 that day -> 05:00 the next."""
    return Interval(
        datetime.combine(day, NIGHT_START),
        datetime.combine(day + timedelta(days=1), NIGHT_END),
        name="night",
    )


def night_windows(span: Interval) -> Iterator[Interval]:
    """Yield the night windows that overlap ``span``, in chronological order.

    Candidates run from the day before ``span.start`` (its window may still be
    open after midnight) through the day of ``span.end``.
    """

    day = span.start.date() - timedelta(days=1)
    last = span.end.date()
    while day <= last:
        window = night_window_for(day)
        if window.intersect(span) is not None:
            yield window
        day += timedelta(days=1)
