from __future__ import annotations

import logging
from typing import Sequence

from ..core.enums import AttendanceStatus, RosterKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import date_key_or_none, db_cursor, fetchall, hhmm_or_none
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_SELECT = """
    SELECT work_date, entity_name, staff_id, status, slot_number, slot_name, time_slot,
           check_in_time, check_out_time, overtime_hours, cabin_number
    FROM attendance_records
"""


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        date=date_key_or_none(r["work_date"]),
        entity_name=r["entity_name"],
        status=AttendanceStatus(r["status"]),
        slot_number=int(r["slot_number"]),
        slot_name=r.get("slot_name") or "",
        time_slot=r.get("time_slot") or "N/A",
        check_in_time=hhmm_or_none(r.get("check_in_time")),
        check_out_time=hhmm_or_none(r.get("check_out_time")),
        overtime_hours=float(r.get("overtime_hours") or 0),
        cabin_number=int(r["cabin_number"]) if r.get("cabin_number") is not None else None,
        staff_id=int(r["staff_id"]) if r.get("staff_id") is not None else None,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_range(self, roster: RosterKind, start: str, end: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT
                + """
                WHERE roster=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC, entity_name ASC, slot_number ASC
                """,
                (roster.value, start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_by_date(self, roster: RosterKind, date: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE roster=%s AND work_date=%s ORDER BY entity_name ASC, slot_number ASC",
                (roster.value, date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_all(self, roster: RosterKind) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE roster=%s ORDER BY work_date DESC, entity_name ASC, slot_number ASC",
                (roster.value,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def replace_date(self, roster: RosterKind, date: str, records: Sequence[AttendanceRecord]) -> None:
        # Delete and insert share one transaction; the DELETE's range lock
        # serialises concurrent saves of the same date.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE roster=%s AND work_date=%s", (roster.value, date))
            deleted = cur.rowcount
            if records:
                cur.executemany(
                    """
                    INSERT INTO attendance_records(
                        roster, work_date, entity_name, staff_id, status, slot_number, slot_name, time_slot,
                        check_in_time, check_out_time, overtime_hours, cabin_number
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    [
                        (
                            roster.value,
                            date,
                            r.entity_name,
                            r.staff_id,
                            r.status.value,
                            r.slot_number,
                            r.slot_name,
                            r.time_slot,
                            r.check_in_time,
                            r.check_out_time,
                            r.overtime_hours,
                            r.cabin_number,
                        )
                        for r in records
                    ],
                )
        logger.debug("Replaced %s %s: %s removed, %s inserted", roster.value, date, deleted, len(records))
