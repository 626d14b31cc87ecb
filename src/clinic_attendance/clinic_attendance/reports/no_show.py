from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_date_key, format_day_date, parse_date_key, parse_date_range
from ..core.constants import find_slot
from ..core.enums import RosterKind
from .analytics import name_order

PRESENT_ELSEWHERE_REMARK = "Present in other slot"


@dataclass(frozen=True)
class NoShowRow:
    sr_no: int
    date: str
    day_date: str
    entity_name: str
    absent_slot: str
    remark: str = ""

    def to_dict(self) -> dict:
        return {
            "srNo": self.sr_no,
            "date": self.date,
            "dayDate": self.day_date,
            "entityName": self.entity_name,
            "absentSlot": self.absent_slot,
            "remark": self.remark,
        }


@dataclass(frozen=True)
class NoShowReport:
    start: str
    end: str
    rows: list[NoShowRow]

    @property
    def total_absences(self) -> int:
        return len(self.rows)

    def to_dict(self) -> dict:
        return {
            "dateRange": {"start": self.start, "end": self.end},
            "totalAbsences": self.total_absences,
            "records": [r.to_dict() for r in self.rows],
        }


def absent_slot_label(roster: RosterKind, record: AttendanceRecord) -> str:
    slot = find_slot(roster, record.slot_number)
    if slot is not None:
        return slot.label
    if record.time_slot and record.time_slot != "N/A":
        return record.time_slot
    return "N/A"


class NoShowService:
    """Lists explicit absences (not unrecorded days) over a date range."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def report(self, roster: RosterKind, start: Optional[str], end: Optional[str]) -> NoShowReport:
        start_d, end_d = parse_date_range(start, end)
        start_key, end_key = format_date_key(start_d), format_date_key(end_d)
        records = self._attendance.get_range(roster, start_key, end_key)

        present_on = {(r.date, r.entity_name) for r in records if r.is_present}
        absences = sorted(
            (r for r in records if not r.is_present),
            key=lambda r: (r.date, name_order(r.entity_name), r.slot_number),
        )

        rows = [
            NoShowRow(
                sr_no=i,
                date=r.date,
                day_date=format_day_date(parse_date_key(r.date)),
                entity_name=r.entity_name,
                absent_slot=absent_slot_label(roster, r),
                remark=PRESENT_ELSEWHERE_REMARK if (r.date, r.entity_name) in present_on else "",
            )
            for i, r in enumerate(absences, start=1)
        ]
        return NoShowReport(start=start_key, end=end_key, rows=rows)
