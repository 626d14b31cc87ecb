from __future__ import annotations

import dataclasses
from typing import Optional, Sequence

import pytest

from src.clinic_attendance.clinic_attendance.attendance.model import AttendanceRecord
from src.clinic_attendance.clinic_attendance.container import wire_container
from src.clinic_attendance.clinic_attendance.core.enums import RosterKind, StaffKind
from src.clinic_attendance.clinic_attendance.holidays.model import Holiday
from src.clinic_attendance.clinic_attendance.staff.model import StaffDraft, StaffMember


class InMemoryStaff:
    def __init__(self):
        self.by_id: dict[int, StaffMember] = {}
        self._id = 0

    def add(self, **fields) -> StaffMember:
        self._id += 1
        member = StaffMember(staff_id=self._id, **fields)
        self.by_id[member.staff_id] = member
        return member

    def get_by_id(self, staff_id: int) -> Optional[StaffMember]:
        return self.by_id.get(staff_id)

    def get_by_name(self, kind: StaffKind, name: str) -> Optional[StaffMember]:
        return next((m for m in self.by_id.values() if m.kind is kind and m.name == name), None)

    def list_by_kinds(self, kinds, *, active_only: bool = False) -> Sequence[StaffMember]:
        items = [m for m in self.by_id.values() if m.kind in kinds and (m.active or not active_only)]
        return sorted(items, key=lambda m: m.name)

    def create(self, draft: StaffDraft) -> int:
        return self.add(**dataclasses.asdict(draft)).staff_id

    def update(self, staff_id: int, draft: StaffDraft) -> bool:
        if staff_id not in self.by_id:
            return False
        self.by_id[staff_id] = StaffMember(staff_id=staff_id, **dataclasses.asdict(draft))
        return True

    def set_active(self, staff_id: int, *, active: bool) -> bool:
        if staff_id not in self.by_id:
            return False
        self.by_id[staff_id] = dataclasses.replace(self.by_id[staff_id], active=active)
        return True

    def delete_by_id(self, staff_id: int) -> bool:
        return self.by_id.pop(staff_id, None) is not None


class InMemoryHolidays:
    def __init__(self):
        self.by_date: dict[str, Holiday] = {}

    def list_range(self, start: str, end: str) -> Sequence[Holiday]:
        return [h for k, h in sorted(self.by_date.items()) if start <= k <= end]

    def list_all(self) -> Sequence[Holiday]:
        return [h for _, h in sorted(self.by_date.items())]

    def add(self, holiday: Holiday) -> None:
        self.by_date[holiday.date] = holiday

    def delete(self, date: str) -> bool:
        return self.by_date.pop(date, None) is not None


class InMemoryAttendance:
    def __init__(self):
        self.by_roster_date: dict[tuple[RosterKind, str], list[AttendanceRecord]] = {}
        self.replace_calls = 0

    def _all(self, roster: RosterKind) -> list[AttendanceRecord]:
        return [r for (ro, _), rows in self.by_roster_date.items() if ro is roster for r in rows]

    def get_range(self, roster: RosterKind, start: str, end: str) -> Sequence[AttendanceRecord]:
        items = [r for r in self._all(roster) if start <= r.date <= end]
        return sorted(items, key=lambda r: (r.date, r.entity_name, r.slot_number))

    def get_by_date(self, roster: RosterKind, date: str) -> Sequence[AttendanceRecord]:
        return sorted(self.by_roster_date.get((roster, date), []), key=lambda r: (r.entity_name, r.slot_number))

    def list_all(self, roster: RosterKind) -> Sequence[AttendanceRecord]:
        items = sorted(self._all(roster), key=lambda r: (r.entity_name, r.slot_number))
        return sorted(items, key=lambda r: r.date, reverse=True)

    def replace_date(self, roster: RosterKind, date: str, records: Sequence[AttendanceRecord]) -> None:
        self.replace_calls += 1
        if records:
            self.by_roster_date[(roster, date)] = list(records)
        else:
            self.by_roster_date.pop((roster, date), None)

    def seed(self, roster: RosterKind, *records: AttendanceRecord) -> None:
        for r in records:
            self.by_roster_date.setdefault((roster, r.date), []).append(r)


@pytest.fixture
def staff_repo():
    return InMemoryStaff()


@pytest.fixture
def holidays_repo():
    return InMemoryHolidays()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def container(staff_repo, holidays_repo, attendance_repo):
    return wire_container(staff_repo=staff_repo, holidays_repo=holidays_repo, attendance_repo=attendance_repo)
