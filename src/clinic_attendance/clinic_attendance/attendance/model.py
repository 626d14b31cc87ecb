from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DAILY_SLOT
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance action for (date, entity name, slot).

    `date` is the canonical YYYY-MM-DD key. Daily staff use slot 0.
    """

    date: str
    entity_name: str
    status: AttendanceStatus
    slot_number: int = DAILY_SLOT
    slot_name: str = ""
    time_slot: str = "N/A"
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    overtime_hours: float = 0.0
    cabin_number: Optional[int] = None
    staff_id: Optional[int] = None

    @property
    def identity(self) -> tuple[str, str, int]:
        return (self.date, self.entity_name, self.slot_number)

    @property
    def is_present(self) -> bool:
        return self.status is AttendanceStatus.PRESENT

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "entityName": self.entity_name,
            "staffId": self.staff_id,
            "status": self.status.value,
            "slotNumber": self.slot_number,
            "slotName": self.slot_name,
            "timeSlot": self.time_slot,
            "checkInTime": self.check_in_time,
            "checkOutTime": self.check_out_time,
            "overtimeHours": self.overtime_hours,
            "cabinNumber": self.cabin_number,
        }
