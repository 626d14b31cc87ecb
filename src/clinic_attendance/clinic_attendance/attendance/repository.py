from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import RosterKind
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Per-roster attendance store keyed by date string."""

    def get_range(self, roster: RosterKind, start: str, end: str) -> Sequence[AttendanceRecord]:
        """Records with start <= date <= end, ordered by date, name, slot."""

        raise NotImplementedError

    def get_by_date(self, roster: RosterKind, date: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self, roster: RosterKind) -> Sequence[AttendanceRecord]:
        """Every record, newest date first."""

        raise NotImplementedError

    def replace_date(self, roster: RosterKind, date: str, records: Sequence[AttendanceRecord]) -> None:
        """Delete every record of `date` and insert `records`, atomically.

        This is the only write path.
        """

        raise NotImplementedError
