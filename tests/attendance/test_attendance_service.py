from __future__ import annotations

import pytest

from src.clinic_attendance.clinic_attendance.core.enums import AttendanceStatus, RosterKind, StaffKind
from src.clinic_attendance.clinic_attendance.core.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    ValidationError,
)

DAY = "2024-06-03"


@pytest.fixture
def roster(staff_repo):
    staff_repo.add(name="Ms. Shreya", kind=StaffKind.EMPLOYEE, working_days=(1, 2, 3), slots=(1, 2, 3), standard_hours=6)
    staff_repo.add(name="Ms. Maid", kind=StaffKind.OTHER, working_days=(1,), slots=(0,), standard_hours=7, work_time="10:00 AM - 5:00 PM")
    staff_repo.add(name="Dr. A", kind=StaffKind.DOCTOR, working_days=(1,), slots=(2,), cabin_number=4)
    return staff_repo


def test_save_day_builds_slot_records_with_overtime(container, roster, attendance_repo):
    records = container.attendance_service.save_day(
        RosterKind.EMPLOYEES,
        DAY,
        {
            "Ms. Shreya_Slot1": {"status": "present", "checkInTime": "08:00", "checkOutTime": "16:30"},
            "Ms. Maid_Daily": {"status": "absent"},
        },
    )

    assert [(r.entity_name, r.slot_number) for r in records] == [("Ms. Maid", 0), ("Ms. Shreya", 1)]
    maid, shreya = records
    assert shreya.slot_name == "Morning Shift"
    assert shreya.time_slot == "8:00 AM - 2:00 PM"
    assert shreya.overtime_hours == 2.5
    assert shreya.staff_id == 1
    assert maid.slot_name == "Other Staff"
    assert maid.time_slot == "10:00 AM - 5:00 PM"
    assert maid.status is AttendanceStatus.ABSENT
    assert maid.overtime_hours == 0
    assert len(attendance_repo.get_by_date(RosterKind.EMPLOYEES, DAY)) == 2


def test_save_day_replaces_previous_sheet(container, roster, attendance_repo):
    svc = container.attendance_service
    svc.save_day(RosterKind.EMPLOYEES, DAY, {"Ms. Shreya_Slot1": {"status": "present"}, "Ms. Shreya_Slot2": {"status": "present"}})
    svc.save_day(RosterKind.EMPLOYEES, DAY, {"Ms. Shreya_Slot3": {"status": "absent"}})

    day = attendance_repo.get_by_date(RosterKind.EMPLOYEES, DAY)
    assert [(r.slot_number, r.status) for r in day] == [(3, AttendanceStatus.ABSENT)]


def test_saving_same_sheet_twice_is_idempotent(container, roster, attendance_repo):
    payload = {"Dr. A_Slot2": {"status": "present", "checkInTime": "11:00", "checkOutTime": "14:00", "cabinNumber": 4}}
    container.attendance_service.save_day(RosterKind.DOCTORS, DAY, payload)
    first = list(attendance_repo.get_by_date(RosterKind.DOCTORS, DAY))
    container.attendance_service.save_day(RosterKind.DOCTORS, DAY, payload)

    assert list(attendance_repo.get_by_date(RosterKind.DOCTORS, DAY)) == first
    assert first[0].cabin_number == 4
    assert first[0].overtime_hours == 0  # doctors have no standard hours


def test_empty_sheet_clears_the_date(container, roster, attendance_repo):
    container.attendance_service.save_day(RosterKind.DOCTORS, DAY, {"Dr. A_Slot2": {"status": "present"}})
    container.attendance_service.save_day(RosterKind.DOCTORS, DAY, {})
    assert attendance_repo.get_by_date(RosterKind.DOCTORS, DAY) == []


def test_duplicate_identity_in_one_sheet_is_a_conflict(container, roster, attendance_repo):
    with pytest.raises(ConflictError):
        container.attendance_service.save_day(
            RosterKind.EMPLOYEES,
            DAY,
            {"Ms. Maid_Daily": {"status": "present"}, "Ms. Maid": {"status": "absent"}},
        )
    assert attendance_repo.replace_calls == 0


@pytest.mark.parametrize(
    "entry",
    [
        {"status": "late"},
        {"status": "present", "checkInTime": "9am"},
        {"status": "present", "checkInTime": "22:00", "checkOutTime": "06:00"},
        "present",
    ],
)
def test_invalid_entries_are_rejected(container, roster, entry):
    with pytest.raises(ValidationError):
        container.attendance_service.save_day(RosterKind.EMPLOYEES, DAY, {"Ms. Shreya_Slot1": entry})


def test_unknown_slot_for_roster_is_rejected(container, roster):
    with pytest.raises(ValidationError):
        container.attendance_service.save_day(RosterKind.EMPLOYEES, DAY, {"Ms. Shreya_Slot4": {"status": "present"}})


def test_bad_date_is_a_bad_request(container, roster):
    with pytest.raises(BadRequestError):
        container.attendance_service.save_day(RosterKind.DOCTORS, "03/06/2024", {})


def test_day_sheet_is_keyed_by_composite_key(container, roster):
    container.attendance_service.save_day(
        RosterKind.EMPLOYEES, DAY, {"Ms. Shreya_Slot2": {"status": "present"}, "Ms. Maid_Daily": {"status": "present"}}
    )
    sheet = container.attendance_service.day_sheet(RosterKind.EMPLOYEES, DAY)
    assert set(sheet) == {"Ms. Shreya_Slot2", "Ms. Maid_Daily"}
    assert sheet["Ms. Shreya_Slot2"]["slotName"] == "Day Shift"


def test_update_times_recomputes_overtime_and_keeps_other_records(container, roster, attendance_repo):
    svc = container.attendance_service
    svc.save_day(
        RosterKind.EMPLOYEES,
        DAY,
        {"Ms. Shreya_Slot1": {"status": "present", "checkInTime": "08:00", "checkOutTime": "14:00"}, "Ms. Maid_Daily": {"status": "present"}},
    )

    updated = svc.update_times(RosterKind.EMPLOYEES, DAY, "Ms. Shreya_Slot1", check_in="08:00", check_out="15:00")

    assert updated.overtime_hours == 1
    day = attendance_repo.get_by_date(RosterKind.EMPLOYEES, DAY)
    assert len(day) == 2
    assert next(r for r in day if r.slot_number == 1).check_out_time == "15:00"


def test_update_times_for_missing_record_is_not_found(container, roster):
    with pytest.raises(NotFoundError):
        container.attendance_service.update_times(RosterKind.EMPLOYEES, DAY, "Ms. Shreya_Slot1", check_in="08:00", check_out="09:00")


def test_list_records_with_and_without_range(container, roster):
    svc = container.attendance_service
    svc.save_day(RosterKind.DOCTORS, "2024-06-03", {"Dr. A_Slot2": {"status": "present"}})
    svc.save_day(RosterKind.DOCTORS, "2024-06-10", {"Dr. A_Slot2": {"status": "absent"}})

    assert [r.date for r in svc.list_records(RosterKind.DOCTORS)] == ["2024-06-10", "2024-06-03"]
    assert [r.date for r in svc.list_records(RosterKind.DOCTORS, "2024-06-01", "2024-06-05")] == ["2024-06-03"]
    assert svc.list_records(RosterKind.EMPLOYEES) == []
