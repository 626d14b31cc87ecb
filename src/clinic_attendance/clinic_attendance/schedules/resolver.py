from __future__ import annotations

from datetime import date
from typing import Collection

from ..common.datetime_utils import day_of_week, format_date_key
from ..staff.model import StaffMember


def slots_for_weekday(member: StaffMember, dow: int) -> tuple[int, ...]:
    """Slots a member works on a weekday; the special schedule wins over the default list."""
    if dow not in member.working_days:
        return ()
    if dow in member.special_schedule:
        return tuple(member.special_schedule[dow])
    return tuple(member.slots)


def scheduled_slots(member: StaffMember, day: date, holidays: Collection[str] = ()) -> tuple[int, ...]:
    """Slot numbers a member is expected in on `day` (empty when not scheduled).

    Never raises: inactive members, dates before the join date, declared
    holidays and off days all resolve to "not scheduled".
    """

    if not member.active:
        return ()

    key = format_date_key(day)
    if member.join_date and key < member.join_date:
        return ()

    if key in holidays:
        return ()

    return slots_for_weekday(member, day_of_week(day))
