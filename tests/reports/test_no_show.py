from src.clinic_attendance.clinic_attendance.attendance.model import AttendanceRecord
from src.clinic_attendance.clinic_attendance.core.enums import AttendanceStatus, RosterKind
from src.clinic_attendance.clinic_attendance.reports.no_show import PRESENT_ELSEWHERE_REMARK, NoShowService


def test_no_absences_gives_empty_report(attendance_repo):
    report = NoShowService(attendance_repo).report(RosterKind.DOCTORS, "2024-06-01", "2024-06-30")

    assert report.to_dict() == {
        "dateRange": {"start": "2024-06-01", "end": "2024-06-30"},
        "totalAbsences": 0,
        "records": [],
    }


def test_absences_are_numbered_in_date_name_slot_order(attendance_repo):
    attendance_repo.seed(
        RosterKind.DOCTORS,
        AttendanceRecord(date="2024-06-04", entity_name="Dr. B", status=AttendanceStatus.ABSENT, slot_number=1),
        AttendanceRecord(date="2024-06-03", entity_name="Dr. B", status=AttendanceStatus.ABSENT, slot_number=3),
        AttendanceRecord(date="2024-06-03", entity_name="Dr. B", status=AttendanceStatus.PRESENT, slot_number=2),
        AttendanceRecord(date="2024-06-03", entity_name="Dr. A", status=AttendanceStatus.ABSENT, slot_number=2),
    )

    report = NoShowService(attendance_repo).report(RosterKind.DOCTORS, "2024-06-01", "2024-06-30")

    assert report.total_absences == 3
    first, second, third = report.rows
    assert (first.sr_no, first.entity_name, first.absent_slot) == (1, "Dr. A", "Slot 2 (11:00 AM - 2:00 PM)")
    assert first.day_date == "Monday, 03 Jun 2024"
    assert first.remark == ""
    assert (second.entity_name, second.remark) == ("Dr. B", PRESENT_ELSEWHERE_REMARK)
    assert (third.sr_no, third.date, third.remark) == (3, "2024-06-04", "")


def test_daily_staff_absence_uses_their_time_slot(attendance_repo):
    attendance_repo.seed(
        RosterKind.EMPLOYEES,
        AttendanceRecord(
            date="2024-06-03", entity_name="Ms. Maid", status=AttendanceStatus.ABSENT, time_slot="10:00 AM - 5:00 PM"
        ),
    )

    (row,) = NoShowService(attendance_repo).report(RosterKind.EMPLOYEES, "2024-06-03", "2024-06-03").rows
    assert row.absent_slot == "10:00 AM - 5:00 PM"


def test_names_sort_case_insensitively_like_analytics(attendance_repo):
    attendance_repo.seed(
        RosterKind.EMPLOYEES,
        AttendanceRecord(date="2024-06-03", entity_name="Zed", status=AttendanceStatus.ABSENT, slot_number=1),
        AttendanceRecord(date="2024-06-03", entity_name="bob", status=AttendanceStatus.ABSENT, slot_number=1),
        AttendanceRecord(date="2024-06-03", entity_name="alice", status=AttendanceStatus.ABSENT, slot_number=1),
    )

    report = NoShowService(attendance_repo).report(RosterKind.EMPLOYEES, "2024-06-03", "2024-06-03")
    assert [r.entity_name for r in report.rows] == ["alice", "bob", "Zed"]
