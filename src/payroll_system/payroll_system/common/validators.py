from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Type

from ..core.exceptions import InvalidRecord, ValidationError


def require_non_empty(value: str, field_name: str, *, error: Type[ValidationError] = ValidationError) -> str:
    if not value or not str(value).strip():
        raise error(f"{field_name} must not be empty")
    return str(value).strip()


def require_date(value: object, field_name: str, *, error: Type[ValidationError] = InvalidRecord) -> date:
    # datetime is a subclass of date but carries a time part we never want here
    if value is None or isinstance(value, datetime) or not isinstance(value, date):
        raise error(f"{field_name} must be a date, got {value!r}")
    return value


def require_non_negative_int(value: object, field_name: str, *, error: Type[ValidationError] = InvalidRecord) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise error(f"{field_name} must be an integer, got {value!r}")
    if value < 0:
        raise error(f"{field_name} must not be negative, got {value}")
    return value


def require_unique_dates(dates: Iterable[date], label: str) -> None:
    seen: set[date] = set()
    for d in dates:
        if d in seen:
            raise InvalidRecord(f"Duplicate {label} for {d.isoformat()}")
        seen.add(d)
