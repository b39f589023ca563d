from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value, field_name: str) -> str:
    """JSON clients may send ids as numbers; scalars are read as strings."""
    if value is None or isinstance(value, (dict, list)):
        raise ValidationError(f"{field_name} is required")
    value = str(value).strip()
    if not value:
        raise ValidationError(f"{field_name} is required")
    return value


def optional_str(value: Optional[str]) -> Optional[str]:
    """Blank form values mean "not supplied"."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def parse_period(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError("period must be an integer") from None
