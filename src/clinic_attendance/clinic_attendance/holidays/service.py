from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import format_date_key, normalize_date_key
from ..common.validators import require_non_empty
from ..core.exceptions import ConflictError, NotFoundError
from .model import Holiday
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


class HolidayService:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list_holidays(self) -> Sequence[Holiday]:
        return self._holidays.list_all()

    def date_keys_between(self, start: date, end: date) -> frozenset[str]:
        """Holiday date keys inside the inclusive range."""
        rows = self._holidays.list_range(format_date_key(start), format_date_key(end))
        return frozenset(h.date for h in rows)

    def is_holiday(self, day: date) -> bool:
        return format_date_key(day) in self.date_keys_between(day, day)

    def add(self, *, date_value: str, name: str, description: Optional[str] = None) -> Holiday:
        key = normalize_date_key(date_value)
        holiday = Holiday(date=key, name=require_non_empty(name, "name"), description=(description or "").strip())
        if self._holidays.list_range(key, key):
            raise ConflictError(f"A holiday is already declared on {key}")
        self._holidays.add(holiday)
        logger.info("Declared holiday %s (%s)", key, holiday.name)
        return holiday

    def delete(self, date_value: str) -> None:
        key = normalize_date_key(date_value)
        if not self._holidays.delete(key):
            raise NotFoundError(f"No holiday declared on {key}")
        logger.info("Removed holiday %s", key)
