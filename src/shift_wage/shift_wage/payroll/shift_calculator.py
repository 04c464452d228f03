from __future__ import annotations

from typing import Iterable

from ..core.exceptions import ComputationInvariantViolation
from ..intervals.breaks import normalize_breaks
from ..intervals.model import Interval, overlap_minutes
from ..intervals.night import night_windows
from .model import ShiftMinutes


def compute_shift_minutes(work: Interval, breaks: Iterable[Interval]) -> ShiftMinutes:
    """Net worked minutes and net night minutes for one shift.

    Night minutes are the night time inside the whole shift span minus the
    night time that fell inside a (normalized) break.
    """

    normalized = normalize_breaks(work, breaks)
    windows = tuple(night_windows(work))

    raw_night = sum(overlap_minutes(work, w) for w in windows)
    break_night = sum(overlap_minutes(b, w) for b in normalized for w in windows)

    net_minutes = work.duration_minutes - sum(b.duration_minutes for b in normalized)
    night_minutes = raw_night - break_night

    if not 0 <= night_minutes <= net_minutes <= work.duration_minutes:
        raise ComputationInvariantViolation(
            f"invalid shift minutes: night={night_minutes} net={net_minutes} "
            f"duration={work.duration_minutes}"
        )
    return ShiftMinutes(net_minutes=net_minutes, night_minutes=night_minutes)
