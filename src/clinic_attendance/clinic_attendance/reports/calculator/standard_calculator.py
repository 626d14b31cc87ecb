from __future__ import annotations

from typing import Optional

from ...common.datetime_utils import parse_hhmm
from ...common.numbers import round_half_up
from .base import HoursDiff, OvertimeCalculator


class StandardOvertimeCalculator(OvertimeCalculator):
    """Standard rule: (out - in) against the standard-hours baseline.

    Same-day arithmetic only: a check-out earlier than the check-in yields a
    negative duration, which is returned as is.
    """

    def diff(self, check_in: Optional[str], check_out: Optional[str], standard_hours: Optional[float]) -> HoursDiff:
        if not check_in or not check_out:
            return HoursDiff()
        try:
            minutes = parse_hhmm(check_out) - parse_hhmm(check_in)
        except ValueError:
            return HoursDiff()

        worked = minutes / 60
        standard = float(standard_hours or 0)
        difference = worked - standard

        return HoursDiff(
            hours_worked=round_half_up(worked),
            overtime=round_half_up(difference) if difference > 0 else 0.0,
            undertime=round_half_up(-difference) if difference < 0 else 0.0,
        )
