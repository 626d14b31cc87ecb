from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.constants import MAX_CABIN, MIN_CABIN
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_hhmm(value: Optional[str], field_name: str) -> Optional[str]:
    """Normalise an optional HH:MM time; blank means not recorded."""
    v = (value or "").strip()
    if not v:
        return None
    try:
        return datetime.strptime(v, "%H:%M").strftime("%H:%M")
    except ValueError:
        raise ValidationError(f"{field_name} must be HH:MM, got {value!r}")


def optional_cabin(value) -> Optional[int]:
    if value in (None, ""):
        return None
    try:
        cabin = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid cabin number: {value!r}")
    if not MIN_CABIN <= cabin <= MAX_CABIN:
        raise ValidationError(f"Cabin number must be between {MIN_CABIN} and {MAX_CABIN}")
    return cabin


def require_int_list(values, field_name: str, *, allowed: range | set[int]) -> tuple[int, ...]:
    out: list[int] = []
    for v in values or ():
        try:
            n = int(v)
        except (TypeError, ValueError):
            raise ValidationError(f"{field_name} contains a non-numeric value: {v!r}")
        if n not in allowed:
            raise ValidationError(f"{field_name} contains an unsupported value: {n}")
        if n not in out:
            out.append(n)
    return tuple(sorted(out))
