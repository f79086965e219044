from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import format_hhmm, parse_hhmm, parse_month


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_month(value: str) -> str:
    year, month = parse_month(value)
    return f"{year:04d}-{month:02d}"


def require_hhmm(value: str, field_name: str) -> str:
    """Validate and normalise a HH:MM time (e.g. '8:05' -> '08:05')."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} must not be empty")
    return format_hhmm(parse_hhmm(str(value)))


def optional_hhmm(value: Optional[str], field_name: str) -> Optional[str]:
    if value is None or not str(value).strip():
        return None
    return require_hhmm(value, field_name)
