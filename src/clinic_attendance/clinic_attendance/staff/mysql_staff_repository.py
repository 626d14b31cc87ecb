from __future__ import annotations

import json
from typing import Optional, Sequence

from ..core.enums import StaffKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import csv_ints, date_key_or_none, db_cursor, fetchall, fetchone, ints_csv
from .model import StaffDraft, StaffMember
from .repository import StaffRepository

_COLUMNS = """
    staff_id, name, kind, working_days, slots, special_schedule, standard_hours,
    join_date, active, cabin_number, role, work_time, time_range
"""


def _decode_schedule(raw) -> dict[int, tuple[int, ...]]:
    if not raw:
        return {}
    data = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
    return {int(day): tuple(int(s) for s in slots) for day, slots in data.items()}


def _encode_schedule(schedule: dict[int, tuple[int, ...]]) -> Optional[str]:
    if not schedule:
        return None
    return json.dumps({str(day): list(slots) for day, slots in sorted(schedule.items())})


def _to_member(r: dict) -> StaffMember:
    hours = r.get("standard_hours")
    return StaffMember(
        staff_id=int(r["staff_id"]),
        name=r["name"],
        kind=StaffKind(r["kind"]),
        working_days=csv_ints(r.get("working_days")),
        slots=csv_ints(r.get("slots")),
        special_schedule=_decode_schedule(r.get("special_schedule")),
        standard_hours=float(hours) if hours is not None else None,
        join_date=date_key_or_none(r.get("join_date")),
        active=bool(r.get("active", 1)),
        cabin_number=int(r["cabin_number"]) if r.get("cabin_number") is not None else None,
        role=r.get("role") or "Staff",
        work_time=r.get("work_time") or "N/A",
        time_range=r.get("time_range") or "",
    )


def _params(draft: StaffDraft) -> tuple:
    return (
        draft.name,
        draft.kind.value,
        ints_csv(draft.working_days),
        ints_csv(draft.slots),
        _encode_schedule(draft.special_schedule),
        draft.standard_hours,
        draft.join_date,
        1 if draft.active else 0,
        draft.cabin_number,
        draft.role,
        draft.work_time,
        draft.time_range,
    )


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, staff_id: int) -> Optional[StaffMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM staff WHERE staff_id=%s", (int(staff_id),))
            r = fetchone(cur)
            return _to_member(r) if r else None

    def get_by_name(self, kind: StaffKind, name: str) -> Optional[StaffMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM staff WHERE kind=%s AND name=%s", (kind.value, name))
            r = fetchone(cur)
            return _to_member(r) if r else None

    def list_by_kinds(self, kinds: Sequence[StaffKind], *, active_only: bool = False) -> Sequence[StaffMember]:
        if not kinds:
            return []
        placeholders = ",".join(["%s"] * len(kinds))
        clauses = [f"kind IN ({placeholders})"]
        params: list[object] = [k.value for k in kinds]
        if active_only:
            clauses.append("active=1")

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM staff WHERE {where} ORDER BY name ASC", tuple(params))
            return [_to_member(r) for r in fetchall(cur)]

    def create(self, draft: StaffDraft) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO staff(name, kind, working_days, slots, special_schedule, standard_hours,
                                  join_date, active, cabin_number, role, work_time, time_range)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _params(draft),
            )
            return int(cur.lastrowid)

    def update(self, staff_id: int, draft: StaffDraft) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE staff
                SET name=%s, kind=%s, working_days=%s, slots=%s, special_schedule=%s, standard_hours=%s,
                    join_date=%s, active=%s, cabin_number=%s, role=%s, work_time=%s, time_range=%s
                WHERE staff_id=%s
                """,
                (*_params(draft), int(staff_id)),
            )
            # rowcount is 0 when nothing changed, so check existence instead.
            cur.execute("SELECT 1 AS found FROM staff WHERE staff_id=%s", (int(staff_id),))
            return fetchone(cur) is not None

    def set_active(self, staff_id: int, *, active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE staff SET active=%s WHERE staff_id=%s", (1 if active else 0, int(staff_id)))
            cur.execute("SELECT 1 AS found FROM staff WHERE staff_id=%s", (int(staff_id),))
            return fetchone(cur) is not None

    def delete_by_id(self, staff_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM staff WHERE staff_id=%s", (int(staff_id),))
            return cur.rowcount > 0
