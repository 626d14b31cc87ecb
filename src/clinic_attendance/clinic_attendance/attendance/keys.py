"""Composite keys used by the day sheet: ``<name>_Slot<n>`` or ``<name>_Daily``."""

from __future__ import annotations

from ..core.constants import DAILY_SLOT
from ..core.exceptions import ValidationError

SLOT_SEPARATOR = "_Slot"
DAILY_SUFFIX = "_Daily"


def compose_key(entity_name: str, slot_number: int) -> str:
    if slot_number == DAILY_SLOT:
        return f"{entity_name}{DAILY_SUFFIX}"
    return f"{entity_name}{SLOT_SEPARATOR}{slot_number}"


def split_key(key: str) -> tuple[str, int]:
    """Decompose a composite key into (entity name, slot number).

    Splits on the last separator so names containing '_Slot' survive. A bare
    name is treated as a daily (slot 0) record.
    """

    key = (key or "").strip()
    if not key:
        raise ValidationError("Attendance key is empty")

    if key.endswith(DAILY_SUFFIX) and len(key) > len(DAILY_SUFFIX):
        return key[: -len(DAILY_SUFFIX)], DAILY_SLOT

    idx = key.rfind(SLOT_SEPARATOR)
    if idx > 0:
        suffix = key[idx + len(SLOT_SEPARATOR):]
        if suffix.isdigit():
            return key[:idx], int(suffix)

    return key, DAILY_SLOT
