from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import normalize_date_key, parse_date_range
from ..common.validators import optional_cabin, optional_hhmm
from ..core.constants import DAILY_SLOT, DAILY_SLOT_NAME, find_slot
from ..core.enums import AttendanceStatus, RosterKind
from ..core.exceptions import BadRequestError, ConflictError, NotFoundError, ValidationError
from ..reports.calculator.base import OvertimeCalculator
from ..reports.calculator.standard_calculator import StandardOvertimeCalculator
from ..staff.model import StaffMember
from ..staff.service import StaffService
from .keys import compose_key, split_key
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _parse_status(value: Any, key: str) -> AttendanceStatus:
    try:
        return AttendanceStatus(str(value or "").strip().lower())
    except ValueError:
        raise ValidationError(f"{key}: status must be 'present' or 'absent', got {value!r}")


def _check_not_overnight(key: str, check_in: Optional[str], check_out: Optional[str]) -> None:
    if check_in and check_out and check_out < check_in:
        raise ValidationError(
            f"{key}: check-out {check_out} is before check-in {check_in}; overnight shifts are not supported"
        )


class AttendanceService:
    """Use case: read and save the per-date attendance sheet of a roster."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        staff: StaffService,
        *,
        calculator: Optional[OvertimeCalculator] = None,
    ):
        self._attendance = attendance
        self._staff = staff
        self._calculator = calculator or StandardOvertimeCalculator()

    def list_records(
        self, roster: RosterKind, start: Optional[str] = None, end: Optional[str] = None
    ) -> Sequence[AttendanceRecord]:
        if not start and not end:
            return self._attendance.list_all(roster)
        start_d, end_d = parse_date_range(start, end)
        return self._attendance.get_range(roster, normalize_date_key(start_d), normalize_date_key(end_d))

    def get_day(self, roster: RosterKind, date: str) -> Sequence[AttendanceRecord]:
        return self._attendance.get_by_date(roster, normalize_date_key(date))

    def day_sheet(self, roster: RosterKind, date: str) -> dict[str, dict]:
        return {compose_key(r.entity_name, r.slot_number): r.to_dict() for r in self.get_day(roster, date)}

    def _overtime(self, member: Optional[StaffMember], status: AttendanceStatus, check_in, check_out) -> float:
        if status is not AttendanceStatus.PRESENT or member is None or member.standard_hours is None:
            return 0.0
        return self._calculator.diff(check_in, check_out, member.standard_hours).overtime

    def build_record(self, roster: RosterKind, date_key: str, key: str, entry: Any) -> AttendanceRecord:
        if not isinstance(entry, Mapping):
            raise ValidationError(f"{key}: entry must be an object with a status")

        name, slot_number = split_key(key)
        if slot_number == DAILY_SLOT and entry.get("slotNumber") not in (None, ""):
            try:
                slot_number = int(entry["slotNumber"])
            except (TypeError, ValueError):
                raise ValidationError(f"{key}: invalid slotNumber {entry['slotNumber']!r}")

        slot = find_slot(roster, slot_number)
        if slot is None and slot_number != DAILY_SLOT:
            raise ValidationError(f"{key}: slot {slot_number} is not defined for {roster.value}")

        status = _parse_status(entry.get("status"), key)
        check_in = optional_hhmm(entry.get("checkInTime"), f"{key} checkInTime")
        check_out = optional_hhmm(entry.get("checkOutTime"), f"{key} checkOutTime")
        _check_not_overnight(key, check_in, check_out)

        member = self._staff.find_by_name(roster, name)
        if slot is not None:
            slot_name, time_slot = slot.name, slot.time_range
        else:
            slot_name = DAILY_SLOT_NAME
            time_slot = entry.get("timeSlot") or (member.work_time if member else "") or "N/A"

        return AttendanceRecord(
            date=date_key,
            entity_name=name,
            status=status,
            slot_number=slot_number,
            slot_name=slot_name,
            time_slot=time_slot,
            check_in_time=check_in,
            check_out_time=check_out,
            overtime_hours=self._overtime(member, status, check_in, check_out),
            cabin_number=optional_cabin(entry.get("cabinNumber")),
            staff_id=member.staff_id if member else None,
        )

    def save_day(self, roster: RosterKind, date: str, entries: Mapping[str, Any]) -> Sequence[AttendanceRecord]:
        """Replace the whole attendance sheet of `date` with `entries`."""

        date_key = normalize_date_key(date)
        if not isinstance(entries, Mapping):
            raise BadRequestError("Attendance payload must be an object keyed by '<name>_Slot<n>'")

        records: list[AttendanceRecord] = []
        seen: set[tuple[str, int]] = set()
        for key, entry in entries.items():
            record = self.build_record(roster, date_key, key, entry)
            ident = (record.entity_name, record.slot_number)
            if ident in seen:
                raise ConflictError(f"Duplicate attendance for {record.entity_name!r} slot {record.slot_number}")
            seen.add(ident)
            records.append(record)

        records.sort(key=lambda r: (r.entity_name, r.slot_number))
        self._attendance.replace_date(roster, date_key, records)
        logger.info("Saved %s attendance for %s (%d records)", roster.value, date_key, len(records))
        return records

    def update_times(
        self,
        roster: RosterKind,
        date: str,
        key: str,
        *,
        check_in: Optional[str],
        check_out: Optional[str],
    ) -> AttendanceRecord:
        """Edit check-in/out of one record, then re-save the full day."""

        date_key = normalize_date_key(date)
        name, slot_number = split_key(key)
        day = list(self._attendance.get_by_date(roster, date_key))

        idx = next((i for i, r in enumerate(day) if (r.entity_name, r.slot_number) == (name, slot_number)), None)
        if idx is None:
            raise NotFoundError(f"No attendance recorded for {key} on {date_key}")

        new_in = optional_hhmm(check_in, "checkInTime")
        new_out = optional_hhmm(check_out, "checkOutTime")
        _check_not_overnight(key, new_in, new_out)

        current = day[idx]
        member = self._staff.find_by_name(roster, name)
        updated = dataclasses.replace(
            current,
            check_in_time=new_in,
            check_out_time=new_out,
            overtime_hours=self._overtime(member, current.status, new_in, new_out),
        )
        day[idx] = updated
        self._attendance.replace_date(roster, date_key, day)
        logger.info("Updated times for %s on %s: %s-%s", key, date_key, new_in, new_out)
        return updated
