from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayService
from .reports.analytics import AnalyticsService
from .reports.calculator.standard_calculator import StandardOvertimeCalculator
from .reports.export import ReportExportService
from .reports.no_show import NoShowService
from .schedules.service import ScheduleService
from .staff.mysql_staff_repository import MySQLStaffRepository
from .staff.repository import StaffRepository
from .staff.service import StaffService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    staff_repo: StaffRepository
    holidays_repo: HolidayRepository
    attendance_repo: AttendanceRepository

    staff_service: StaffService
    holiday_service: HolidayService
    schedule_service: ScheduleService
    attendance_service: AttendanceService
    analytics_service: AnalyticsService
    no_show_service: NoShowService
    export_service: ReportExportService

    def storage_ok(self) -> bool:
        return self.conn.ping() if self.conn else True


def wire_container(
    *,
    staff_repo: StaffRepository,
    holidays_repo: HolidayRepository,
    attendance_repo: AttendanceRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build services on top of any repository implementations."""

    staff_service = StaffService(staff_repo)
    holiday_service = HolidayService(holidays_repo)
    schedule_service = ScheduleService(staff_service, holiday_service)
    attendance_service = AttendanceService(
        attendance_repo,
        staff_service,
        calculator=StandardOvertimeCalculator(),
    )
    analytics_service = AnalyticsService(attendance_repo, holidays=holiday_service, staff=staff_service)
    no_show_service = NoShowService(attendance_repo)
    export_service = ReportExportService(attendance_service, analytics_service, no_show_service)

    return Container(
        conn=conn,
        staff_repo=staff_repo,
        holidays_repo=holidays_repo,
        attendance_repo=attendance_repo,
        staff_service=staff_service,
        holiday_service=holiday_service,
        schedule_service=schedule_service,
        attendance_service=attendance_service,
        analytics_service=analytics_service,
        no_show_service=no_show_service,
        export_service=export_service,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return wire_container(
        staff_repo=MySQLStaffRepository(conn),
        holidays_repo=MySQLHolidayRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
    )
