from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.service import AttendanceService
from ..common.csv_export import render_csv
from ..common.datetime_utils import now_local, parse_date_key, weekday_name
from ..core.enums import ReportKind, RosterKind
from ..core.exceptions import BadRequestError
from .analytics import AnalyticsService
from .no_show import NoShowService


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str


def export_filename(kind: ReportKind, start: Optional[str], end: Optional[str]) -> str:
    date_range = f"{start}-to-{end}" if start and end else "all"
    return f"{kind.value}-{date_range}.csv"


class ReportExportService:
    """Renders the tabular views (raw records, analytics, no-shows) as CSV."""

    def __init__(self, attendance: AttendanceService, analytics: AnalyticsService, no_show: NoShowService):
        self._attendance = attendance
        self._analytics = analytics
        self._no_show = no_show

    def export(self, roster: RosterKind, kind: str | ReportKind, start: Optional[str], end: Optional[str]) -> CsvExport:
        try:
            report_kind = ReportKind(kind)
        except ValueError:
            raise BadRequestError(f"Unknown report kind: {kind!r}")

        if report_kind is ReportKind.RECORDS:
            rows = self._records_rows(roster, start, end)
        elif report_kind is ReportKind.ANALYTICS:
            rows = self._analytics_rows(roster, start, end)
        else:
            rows = self._noshow_rows(roster, start, end)

        return CsvExport(filename=export_filename(report_kind, start, end), content=render_csv(rows))

    def _records_rows(self, roster: RosterKind, start, end) -> list[list]:
        name_header = "Doctor Name" if roster is RosterKind.DOCTORS else "Employee Name"
        rows: list[list] = [
            ["Date", "Day", name_header, "Status", "Slot", "Time Slot", "Check-In Time", "Check-Out Time",
             "Overtime Hours", "Cabin"]
        ]
        records = sorted(self._attendance.list_records(roster, start, end), key=lambda r: (r.date, r.entity_name, r.slot_number))
        for r in records:
            rows.append(
                [
                    r.date,
                    weekday_name(parse_date_key(r.date)),
                    r.entity_name,
                    r.status.value.capitalize(),
                    r.slot_name or "N/A",
                    r.time_slot or "N/A",
                    r.check_in_time or "N/A",
                    r.check_out_time or "N/A",
                    r.overtime_hours,
                    r.cabin_number if r.cabin_number is not None else "",
                ]
            )
        return rows

    def _analytics_rows(self, roster: RosterKind, start, end) -> list[list]:
        report = self._analytics.report_for_roster(roster, start, end)
        title = "Doctor Attendance Report" if roster is RosterKind.DOCTORS else "Employee Attendance Report"
        rows: list[list] = [
            [title],
            ["Generated on:", now_local().strftime("%Y-%m-%d %H:%M:%S")],
            ["Date Range:", f"{report.start} to {report.end}"],
            [],
            ["SUMMARY STATISTICS"],
            ["Total Working Days (excluding Sundays and holidays):", report.total_working_days],
            ["Days with Recorded Attendance:", report.total_recorded_days],
            [],
            ["STATISTICS"],
            ["Name", "Present Days", "Absent Days", "Total Overtime Hours", "Total Slot Attendances",
             "Attendance Rate (%)"],
        ]
        for e in report.entities:
            rows.append(
                [e.name, e.present_days, e.absent_days, e.total_overtime_hours, e.total_slot_attendances,
                 e.attendance_rate]
            )
        return rows

    def _noshow_rows(self, roster: RosterKind, start, end) -> list[list]:
        report = self._no_show.report(roster, start, end)
        rows: list[list] = [["Sr No", "Day & Date", "Name", "Absent Slot", "Remark"]]
        for r in report.rows:
            rows.append([r.sr_no, r.day_date, r.entity_name, r.absent_slot, r.remark])
        return rows
