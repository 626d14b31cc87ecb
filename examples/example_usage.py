"""Example: using the service layer directly (no Flask).

Controllers stay thin; everything below goes through the same services the API uses.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.clinic_attendance.clinic_attendance.container import build_container
from src.clinic_attendance.clinic_attendance.core.enums import RosterKind


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    today = date.today()
    schedule = container.schedule_service.roster_for_date(RosterKind.DOCTORS, today)
    print(schedule.to_dict())

    report = container.analytics_service.report_for_roster(RosterKind.EMPLOYEES, today.replace(day=1).isoformat(), today.isoformat())
    print(report.to_dict())


if __name__ == "__main__":
    main()
