from __future__ import annotations

from datetime import datetime

from ..core.exceptions import ValidationError

_INPUT_FORMATS = ("%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M:%S")


def parse_local_datetime(value: str, field_name: str) -> datetime:
    """Parse an HTML ``datetime-local`` value (YYYY-MM-DDTHH:MM)."""
    text = (value or "").strip()
    for fmt in _INPUT_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise ValidationError(f"{field_name} không đúng định dạng YYYY-MM-DDTHH:MM: {value!r}", field=field_name)


def format_us_date(value: datetime) -> str:
    return f"{value.month}/{value.day}/{value.year}"


def format_clock(value: datetime) -> str:
    """12-hour clock without leading zero, e.g. ``9:00 AM``, ``6:00 PM``."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().replace(microsecond=0)
