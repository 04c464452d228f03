from __future__ import annotations

from functools import reduce
from typing import Iterable

from .model import Interval


def _merge(runs: tuple[Interval, ...], current: Interval) -> tuple[Interval, ...]:
    if runs and runs[-1].overlaps_or_touches(current):
        last = runs[-1]
        return runs[:-1] + (Interval(last.start, max(last.end, current.end), name=last.name),)
    return runs + (current,)


def normalize_breaks(work: Interval, breaks: Iterable[Interval]) -> tuple[Interval, ...]:
    """Clip breaks to the work span, then merge overlapping/adjacent ones.

    Input order and overlaps are arbitrary; the result is sorted and disjoint,
    and every element lies inside ``work``. Breaks entirely outside the shift
    are dropped.
    """

    clipped = (b.clip(work) for b in breaks)
    ordered = sorted((c for c in clipped if c is not None), key=lambda b: (b.start, b.end))
    return reduce(_merge, ordered, ())
