from __future__ import annotations

import math
from datetime import date
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_iso_date(value: Any, message: str) -> date:
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(message) from None


def require_positive_number(
    value: Any,
    message: str,
    *,
    max_value: Optional[float] = None,
    places: Optional[int] = None,
) -> float:
    """Finite number > 0, optionally <= max_value and with at most `places` decimals."""
    # bool is an int subclass; "true" is not an hour count
    if value is None or isinstance(value, bool):
        raise ValidationError(message)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(message) from None
    if not math.isfinite(number) or number <= 0:
        raise ValidationError(message)
    if max_value is not None and number > max_value:
        raise ValidationError(message)
    if places is not None and round(number, places) != number:
        raise ValidationError(message)
    return number


def require_entry_id(value: Any, message: str) -> int:
    if value is None or isinstance(value, bool) or value == "":
        raise ValidationError(message)
    try:
        entry_id = int(value)
    except (TypeError, ValueError):
        raise ValidationError(message) from None
    if isinstance(value, float) and value != entry_id:
        raise ValidationError(message)
    if entry_id == 0:
        raise ValidationError(message)
    return entry_id
