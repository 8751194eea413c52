from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from fleet_app.errors import ValidationError

DateLike = Union[date, str]


def parse_date_str(val: str) -> Optional[date]:
    try:
        return datetime.strptime(val.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        return None


def coerce_date(value: DateLike, field_name: str = "date") -> date:
    """Accepts a date or a YYYY-MM-DD string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = parse_date_str(value) if isinstance(value, str) else None
    if parsed is None:
        raise ValidationError(f"Invalid {field_name}: {value!r}. Please use YYYY-MM-DD.")
    return parsed


def coerce_amount(value, field_name: str = "amount") -> float:
    """Accepts anything float() does; raises ValidationError otherwise."""
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name}: {value!r}")
