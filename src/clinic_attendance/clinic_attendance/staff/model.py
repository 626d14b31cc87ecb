from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import RosterKind, StaffKind


@dataclass(frozen=True)
class StaffMember:
    """Domain entity: a doctor, shift employee or daily (other) staff member.

    Note: plain data object, no DB access. `staff_id` is the stable key;
    `name` is a mutable display attribute that attendance records copy.
    """

    staff_id: int
    name: str
    kind: StaffKind
    working_days: tuple[int, ...] = ()
    slots: tuple[int, ...] = ()
    special_schedule: dict[int, tuple[int, ...]] = field(default_factory=dict)
    standard_hours: Optional[float] = None
    join_date: Optional[str] = None
    active: bool = True
    cabin_number: Optional[int] = None
    role: str = "Staff"
    work_time: str = "N/A"
    time_range: str = ""

    @property
    def roster(self) -> RosterKind:
        return RosterKind.for_staff(self.kind)

    def to_dict(self) -> dict:
        return {
            "id": self.staff_id,
            "name": self.name,
            "kind": self.kind.value,
            "days": list(self.working_days),
            "slots": list(self.slots),
            "specialSchedule": {str(k): list(v) for k, v in sorted(self.special_schedule.items())},
            "standardHours": self.standard_hours,
            "joiningDate": self.join_date,
            "active": self.active,
            "cabinNumber": self.cabin_number,
            "role": self.role,
            "workTime": self.work_time,
            "timeRange": self.time_range,
        }


@dataclass(frozen=True)
class StaffDraft:
    """Validated field set used to create or replace a staff member."""

    name: str
    kind: StaffKind
    working_days: tuple[int, ...]
    slots: tuple[int, ...]
    special_schedule: dict[int, tuple[int, ...]]
    standard_hours: Optional[float]
    join_date: Optional[str]
    active: bool
    cabin_number: Optional[int]
    role: str
    work_time: str
    time_range: str
