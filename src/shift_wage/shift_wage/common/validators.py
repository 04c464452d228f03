from __future__ import annotations

from ..core.exceptions import InvalidRate, ValidationError


def require_non_empty(value, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} không hợp lệ", field=field_name)
    return str(value).strip()


def optional_text(value, field_name: str) -> str:
    """Stripped text, or "" when missing. Non-string JSON values are rejected."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} phải là chuỗi thời gian", field=field_name)
    return value.strip()


def require_non_negative_int(value, field_name: str = "hourly_rate") -> int:
    """Strict check: real ints only (no bool, float or str), >= 0."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRate(f"{field_name} phải là số nguyên: {value!r}", field=field_name)
    if value < 0:
        raise InvalidRate(f"{field_name} không được âm: {value}", field=field_name)
    return value


def require_rate(value, field_name: str = "hourly_rate") -> int:
    """Accept ints or digit strings from forms; reject negatives and fractions."""
    if isinstance(value, str) or value is None:
        text = require_non_empty(value, field_name)
        try:
            value = int(text)
        except ValueError:
            raise InvalidRate(f"{field_name} phải là số nguyên: {text!r}", field=field_name) from None
    return require_non_negative_int(value, field_name)
