from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import count_working_days, format_date_key, parse_date_range
from ..common.numbers import round_half_up
from ..core.enums import RosterKind
from ..holidays.service import HolidayService
from ..staff.service import StaffService

logger = logging.getLogger(__name__)


@dataclass
class _Accumulator:
    name: str
    present_dates: set[str] = field(default_factory=set)
    absent_dates: set[str] = field(default_factory=set)
    slot_attendances: int = 0
    overtime_hours: float = 0.0


@dataclass(frozen=True)
class EntityStats:
    name: str
    present_days: int
    absent_days: int
    total_slot_attendances: int
    total_overtime_hours: float
    attendance_rate: float

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "totalSlotAttendances": self.total_slot_attendances,
            "totalOvertimeHours": self.total_overtime_hours,
            "attendanceRate": self.attendance_rate,
        }


@dataclass(frozen=True)
class AnalyticsReport:
    start: str
    end: str
    total_working_days: int
    total_recorded_days: int
    entities: list[EntityStats]

    def to_dict(self) -> dict:
        return {
            "totalWorkingDays": self.total_working_days,
            "totalRecordedDays": self.total_recorded_days,
            "dateRange": {"start": self.start, "end": self.end},
            "entities": [e.to_dict() for e in self.entities],
        }


def name_order(name: str) -> tuple[str, str]:
    return (name.casefold(), name)


def attendance_rate(present_days: int, working_days: int) -> float:
    if working_days <= 0:
        return 0
    return round_half_up(present_days / working_days * 100, 2)


class AnalyticsService:
    """Attendance statistics over a date range for one roster."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        holidays: Optional[HolidayService] = None,
        staff: Optional[StaffService] = None,
    ):
        self._attendance = attendance
        self._holidays = holidays
        self._staff = staff

    def report(
        self,
        start: Optional[str],
        end: Optional[str],
        roster_names: Iterable[str],
        *,
        roster: RosterKind = RosterKind.EMPLOYEES,
    ) -> AnalyticsReport:
        start_d, end_d = parse_date_range(start, end)
        start_key, end_key = format_date_key(start_d), format_date_key(end_d)

        holiday_keys = self._holidays.date_keys_between(start_d, end_d) if self._holidays else frozenset()
        total_working_days = count_working_days(start_d, end_d, holiday_keys)

        records = self._attendance.get_range(roster, start_key, end_key)
        total_recorded_days = len({r.date for r in records})

        stats: dict[str, _Accumulator] = {name: _Accumulator(name) for name in roster_names}
        for r in records:
            acc = stats.get(r.entity_name)
            if acc is None:
                # Names no longer on the roster (renamed/removed) still report.
                acc = stats[r.entity_name] = _Accumulator(r.entity_name)
            if r.is_present:
                acc.present_dates.add(r.date)
                acc.slot_attendances += 1
                acc.overtime_hours += r.overtime_hours or 0
            else:
                acc.absent_dates.add(r.date)

        entities = [
            EntityStats(
                name=acc.name,
                present_days=len(acc.present_dates),
                absent_days=len(acc.absent_dates),
                total_slot_attendances=acc.slot_attendances,
                total_overtime_hours=round_half_up(acc.overtime_hours),
                attendance_rate=attendance_rate(len(acc.present_dates), total_working_days),
            )
            for acc in stats.values()
        ]
        entities.sort(key=lambda e: name_order(e.name))

        logger.debug(
            "Analytics %s %s..%s: %d working days, %d records", roster.value, start_key, end_key,
            total_working_days, len(records),
        )
        return AnalyticsReport(
            start=start_key,
            end=end_key,
            total_working_days=total_working_days,
            total_recorded_days=total_recorded_days,
            entities=entities,
        )

    def report_for_roster(self, roster: RosterKind, start: Optional[str], end: Optional[str]) -> AnalyticsReport:
        names = [m.name for m in self._staff.list_roster(roster, active_only=True)] if self._staff else []
        return self.report(start, end, names, roster=roster)
