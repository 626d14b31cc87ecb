"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import RosterKind


@dataclass(frozen=True)
class Slot:
    number: int
    name: str
    time_range: str

    @property
    def label(self) -> str:
        return f"{self.name} ({self.time_range})"


# Non-slotted (daily) staff are recorded under this pseudo-slot.
DAILY_SLOT = 0
DAILY_SLOT_NAME = "Other Staff"

DOCTOR_SLOTS: tuple[Slot, ...] = (
    Slot(1, "Slot 1", "8:00 AM - 11:00 AM"),
    Slot(2, "Slot 2", "11:00 AM - 2:00 PM"),
    Slot(3, "Slot 3", "2:00 PM - 5:00 PM"),
    Slot(4, "Slot 4", "5:00 PM - 8:00 PM"),
)

EMPLOYEE_SLOTS: tuple[Slot, ...] = (
    Slot(1, "Morning Shift", "8:00 AM - 2:00 PM"),
    Slot(2, "Day Shift", "11:00 AM - 5:00 PM"),
    Slot(3, "Evening Shift", "5:00 PM - 8:00 PM"),
)

SLOT_CATALOG: dict[RosterKind, tuple[Slot, ...]] = {
    RosterKind.DOCTORS: DOCTOR_SLOTS,
    RosterKind.EMPLOYEES: EMPLOYEE_SLOTS,
}

MIN_CABIN = 1
MAX_CABIN = 10

# Monday..Saturday with 0 = Sunday.
DEFAULT_WORKING_DAYS: tuple[int, ...] = (1, 2, 3, 4, 5, 6)

WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def slot_catalog(roster: RosterKind) -> tuple[Slot, ...]:
    return SLOT_CATALOG[roster]


def find_slot(roster: RosterKind, number: int | None) -> Slot | None:
    if number is None:
        return None
    for slot in SLOT_CATALOG[roster]:
        if slot.number == number:
            return slot
    return None
