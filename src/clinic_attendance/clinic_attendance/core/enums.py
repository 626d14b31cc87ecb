from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status stored per slot record."""

    PRESENT = "present"
    ABSENT = "absent"


class StaffKind(str, Enum):
    """Kind of staff member kept in the roster."""

    DOCTOR = "doctor"
    EMPLOYEE = "employee"
    OTHER = "other"


class RosterKind(str, Enum):
    """Attendance partition: doctors, or employees together with other staff."""

    DOCTORS = "doctors"
    EMPLOYEES = "employees"

    @property
    def staff_kinds(self) -> tuple[StaffKind, ...]:
        if self is RosterKind.DOCTORS:
            return (StaffKind.DOCTOR,)
        return (StaffKind.EMPLOYEE, StaffKind.OTHER)

    @classmethod
    def for_staff(cls, kind: StaffKind) -> "RosterKind":
        return cls.DOCTORS if kind is StaffKind.DOCTOR else cls.EMPLOYEES


class ReportKind(str, Enum):
    """Tabular views that can be exported as CSV."""

    RECORDS = "records"
    ANALYTICS = "analytics"
    NOSHOW = "noshow"
