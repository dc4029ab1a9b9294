from __future__ import annotations

from typing import Optional, Union

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_non_negative_int(value: Union[int, str, None], field_name: str) -> int:
    """Accept an int or a numeric form string; reject bools, floats and negatives."""
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")

    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValidationError(f"{field_name} is required")
        try:
            value = int(value)
        except ValueError:
            raise ValidationError(f"{field_name} must be a whole number")

    if not isinstance(value, int):
        raise ValidationError(f"{field_name} must be a whole number")
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def optional_text(value: Optional[str], field_name: str = "Remarks") -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    value = value.strip()
    return value or None
