from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import normalize_date_key
from ..common.validators import optional_cabin, require_int_list, require_non_empty
from ..core.constants import DAILY_SLOT, DEFAULT_WORKING_DAYS, slot_catalog
from ..core.enums import RosterKind, StaffKind
from ..core.exceptions import BadRequestError, ConflictError, NotFoundError, ValidationError
from .model import StaffDraft, StaffMember
from .repository import StaffRepository

logger = logging.getLogger(__name__)

_WEEKDAYS = range(0, 7)


def _parse_kind(value: Any) -> StaffKind:
    try:
        return StaffKind(str(value or StaffKind.EMPLOYEE.value).strip().lower())
    except ValueError:
        raise BadRequestError(f"Unknown staff type: {value!r}")


def _parse_hours(value: Any, *, required: bool) -> Optional[float]:
    if value in (None, ""):
        if required:
            raise ValidationError("standardHours is required")
        return None
    try:
        hours = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"standardHours must be a number, got {value!r}")
    if hours < 0 or hours > 24:
        raise ValidationError("standardHours must be between 0 and 24")
    return hours


class StaffService:
    """Use case: manage the clinic roster (doctors, employees, other staff)."""

    def __init__(self, staff: StaffRepository):
        self._staff = staff

    def build_draft(self, payload: Mapping[str, Any], *, existing: Optional[StaffMember] = None) -> StaffDraft:
        """Validate an API payload; fields missing on edit keep their current value."""

        def pick(key: str, current: Any) -> Any:
            return payload[key] if key in payload else current

        kind = _parse_kind(pick("kind", existing.kind.value if existing else payload.get("type")))
        name = require_non_empty(pick("name", existing.name if existing else ""), "name")
        roster = RosterKind.for_staff(kind)

        if kind is StaffKind.OTHER:
            allowed_slots: set[int] = {DAILY_SLOT}
        else:
            allowed_slots = {s.number for s in slot_catalog(roster)}

        default_days = existing.working_days if existing else DEFAULT_WORKING_DAYS
        working_days = require_int_list(pick("days", default_days), "days", allowed=_WEEKDAYS)

        if existing:
            default_slots: Sequence[int] = existing.slots
        elif kind is StaffKind.DOCTOR:
            default_slots = ()
        elif kind is StaffKind.OTHER:
            default_slots = (DAILY_SLOT,)
        else:
            default_slots = tuple(sorted(allowed_slots))
        slots = require_int_list(pick("slots", default_slots), "slots", allowed=allowed_slots)

        if kind is StaffKind.DOCTOR:
            if not working_days:
                raise ValidationError("Select at least one working day")
            if not slots:
                raise ValidationError("Select at least one time slot")

        raw_special = pick("specialSchedule", existing.special_schedule if existing else {}) or {}
        if not isinstance(raw_special, Mapping):
            raise ValidationError("specialSchedule must map a day of week to a slot list")
        special: dict[int, tuple[int, ...]] = {}
        for day, day_slots in raw_special.items():
            try:
                dow = int(day)
            except (TypeError, ValueError):
                raise ValidationError(f"specialSchedule day must be 0-6, got {day!r}")
            if dow not in _WEEKDAYS:
                raise ValidationError(f"specialSchedule day must be 0-6, got {day!r}")
            special[dow] = require_int_list(day_slots, "specialSchedule", allowed=allowed_slots)

        standard_hours = _parse_hours(
            pick("standardHours", existing.standard_hours if existing else None),
            required=kind is not StaffKind.DOCTOR,
        )

        raw_join = pick("joiningDate", existing.join_date if existing else None)
        join_date = normalize_date_key(raw_join, "joiningDate") if raw_join else None

        cabin = optional_cabin(pick("cabinNumber", existing.cabin_number if existing else None))
        if cabin is not None and kind is not StaffKind.DOCTOR:
            raise ValidationError("Only doctors can be assigned a cabin")

        return StaffDraft(
            name=name,
            kind=kind,
            working_days=working_days,
            slots=slots,
            special_schedule=special,
            standard_hours=standard_hours,
            join_date=join_date,
            active=bool(pick("active", existing.active if existing else True)),
            cabin_number=cabin,
            role=str(pick("role", existing.role if existing else "Staff") or "Staff").strip(),
            work_time=str(pick("workTime", existing.work_time if existing else "N/A") or "N/A").strip(),
            time_range=str(pick("timeRange", existing.time_range if existing else "") or "").strip(),
        )

    def _ensure_unique_name(self, draft: StaffDraft, *, staff_id: Optional[int] = None) -> None:
        # Names are unique per roster; employees and other staff share one.
        roster = RosterKind.for_staff(draft.kind)
        for kind in roster.staff_kinds:
            other = self._staff.get_by_name(kind, draft.name)
            if other and other.staff_id != staff_id:
                raise ConflictError(f"{draft.name!r} already exists in the {roster.value} roster as {other.kind.value}")

    def _warn_shared_cabin(self, draft: StaffDraft, *, staff_id: Optional[int] = None) -> None:
        if draft.cabin_number is None or not draft.active:
            return
        for doc in self._staff.list_by_kinds([StaffKind.DOCTOR], active_only=True):
            if doc.cabin_number == draft.cabin_number and doc.staff_id != staff_id:
                logger.warning("Cabin %s is also assigned to %s", draft.cabin_number, doc.name)

    def get(self, staff_id: int) -> StaffMember:
        member = self._staff.get_by_id(int(staff_id))
        if not member:
            raise NotFoundError(f"Staff member {staff_id} not found")
        return member

    def list_members(self, kind: Optional[str] = None, *, active_only: bool = False) -> Sequence[StaffMember]:
        kinds = [_parse_kind(kind)] if kind else list(StaffKind)
        return self._staff.list_by_kinds(kinds, active_only=active_only)

    def list_roster(self, roster: RosterKind, *, active_only: bool = True) -> Sequence[StaffMember]:
        return self._staff.list_by_kinds(list(roster.staff_kinds), active_only=active_only)

    def find_by_name(self, roster: RosterKind, name: str) -> Optional[StaffMember]:
        for kind in roster.staff_kinds:
            member = self._staff.get_by_name(kind, name)
            if member:
                return member
        return None

    def create(self, payload: Mapping[str, Any]) -> int:
        draft = self.build_draft(payload)
        self._ensure_unique_name(draft)
        self._warn_shared_cabin(draft)
        staff_id = self._staff.create(draft)
        logger.info("Created %s %r (id=%s)", draft.kind.value, draft.name, staff_id)
        return staff_id

    def update(self, staff_id: int, payload: Mapping[str, Any]) -> StaffMember:
        existing = self.get(staff_id)
        draft = self.build_draft(payload, existing=existing)
        self._ensure_unique_name(draft, staff_id=existing.staff_id)
        self._warn_shared_cabin(draft, staff_id=existing.staff_id)
        if not self._staff.update(existing.staff_id, draft):
            raise NotFoundError(f"Staff member {staff_id} not found")
        if draft.name != existing.name:
            # Records keep the name they were written under.
            logger.info("Renamed staff %s from %r to %r", staff_id, existing.name, draft.name)
        return self.get(existing.staff_id)

    def toggle_active(self, staff_id: int) -> StaffMember:
        member = self.get(staff_id)
        if not self._staff.set_active(member.staff_id, active=not member.active):
            raise NotFoundError(f"Staff member {staff_id} not found")
        return self.get(member.staff_id)

    def delete(self, staff_id: int) -> None:
        """Doctors are deactivated; employees and other staff are removed."""

        member = self.get(staff_id)
        if member.kind is StaffKind.DOCTOR:
            self._staff.set_active(member.staff_id, active=False)
            logger.info("Deactivated doctor %r (id=%s)", member.name, member.staff_id)
            return

        if not self._staff.delete_by_id(member.staff_id):
            raise NotFoundError(f"Staff member {staff_id} not found")
        logger.info("Deleted %s %r (id=%s)", member.kind.value, member.name, member.staff_id)
