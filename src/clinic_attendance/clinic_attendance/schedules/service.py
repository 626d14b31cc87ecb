from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_date_key
from ..core.constants import DAILY_SLOT, MAX_CABIN, MIN_CABIN, slot_catalog
from ..core.enums import RosterKind, StaffKind
from ..core.exceptions import BadRequestError
from ..holidays.service import HolidayService
from ..staff.model import StaffMember
from ..staff.service import StaffService
from .resolver import scheduled_slots, slots_for_weekday


@dataclass(frozen=True)
class ScheduledEntry:
    member: StaffMember
    slots: tuple[int, ...]


@dataclass(frozen=True)
class DaySchedule:
    date: str
    roster: RosterKind
    is_holiday: bool
    entries: list[ScheduledEntry]
    slot_board: dict[int, list[str]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "roster": self.roster.value,
            "isHoliday": self.is_holiday,
            "entries": [{"name": e.member.name, "id": e.member.staff_id, "slots": list(e.slots)} for e in self.entries],
            "slots": {str(k): v for k, v in self.slot_board.items()},
        }


class ScheduleService:
    """Use case: who is expected at the clinic on a given date/weekday."""

    def __init__(self, staff: StaffService, holidays: HolidayService):
        self._staff = staff
        self._holidays = holidays

    def roster_for_date(self, roster: RosterKind, day: date) -> DaySchedule:
        is_holiday = self._holidays.is_holiday(day)
        holiday_keys = {format_date_key(day)} if is_holiday else set()
        board: dict[int, list[str]] = {s.number: [] for s in slot_catalog(roster)}
        if roster is RosterKind.EMPLOYEES:
            board[DAILY_SLOT] = []

        entries: list[ScheduledEntry] = []
        for member in self._staff.list_roster(roster, active_only=True):
            slots = scheduled_slots(member, day, holiday_keys)
            if not slots:
                continue
            entries.append(ScheduledEntry(member=member, slots=slots))
            for s in slots:
                board.setdefault(s, []).append(member.name)

        return DaySchedule(
            date=format_date_key(day),
            roster=roster,
            is_holiday=is_holiday,
            entries=entries,
            slot_board=board,
        )

    def cabin_occupancy(self, *, dow: int, slot: Optional[int] = None, cabin: Optional[int] = None) -> dict:
        """Cabins occupied by active doctors on a weekday, optionally for one slot/cabin."""

        if dow not in range(0, 7):
            raise BadRequestError("day must be between 0 (Sunday) and 6 (Saturday)")
        if cabin is not None and not MIN_CABIN <= cabin <= MAX_CABIN:
            raise BadRequestError(f"cabin must be between {MIN_CABIN} and {MAX_CABIN}")

        occupancy: dict[int, dict] = {}
        for doctor in self._staff.list_roster(RosterKind.DOCTORS, active_only=True):
            if doctor.kind is not StaffKind.DOCTOR or doctor.cabin_number is None:
                continue
            doctor_slots = slots_for_weekday(doctor, dow)
            if slot is not None:
                doctor_slots = tuple(s for s in doctor_slots if s == slot)
            if not doctor_slots:
                continue

            entry = occupancy.setdefault(doctor.cabin_number, {"slots": [], "doctors": []})
            for s in doctor_slots:
                if s not in entry["slots"]:
                    entry["slots"].append(s)
                entry["doctors"].append({"name": doctor.name, "slot": s, "time": doctor.time_range})

        cabins = [cabin] if cabin is not None else list(range(MIN_CABIN, MAX_CABIN + 1))
        out = []
        for number in cabins:
            entry = occupancy.get(number)
            out.append(
                {
                    "cabin": number,
                    "booked": entry is not None,
                    "slots": sorted(entry["slots"]) if entry else [],
                    "doctors": entry["doctors"] if entry else [],
                }
            )

        booked = sum(1 for c in out if c["booked"])
        return {"day": dow, "slot": slot, "cabins": out, "booked": booked, "available": len(out) - booked}
