from datetime import date

import pytest

from src.clinic_attendance.clinic_attendance.core.exceptions import BadRequestError, ConflictError, NotFoundError, ValidationError


def test_add_and_list_holidays(container):
    container.holiday_service.add(date_value="2024-08-15", name="Independence Day")
    container.holiday_service.add(date_value="2024-01-26", name="Republic Day", description=" national ")

    holidays = container.holiday_service.list_holidays()
    assert [h.date for h in holidays] == ["2024-01-26", "2024-08-15"]
    assert holidays[0].description == "national"
    assert container.holiday_service.is_holiday(date(2024, 8, 15))
    assert container.holiday_service.date_keys_between(date(2024, 1, 1), date(2024, 6, 30)) == {"2024-01-26"}


def test_second_holiday_on_same_date_conflicts(container):
    container.holiday_service.add(date_value="2024-08-15", name="Independence Day")
    with pytest.raises(ConflictError):
        container.holiday_service.add(date_value="2024-08-15", name="Again")


def test_invalid_holiday_input(container):
    with pytest.raises(BadRequestError):
        container.holiday_service.add(date_value="15/08/2024", name="X")
    with pytest.raises(ValidationError):
        container.holiday_service.add(date_value="2024-08-15", name="")


def test_delete_unknown_holiday(container):
    with pytest.raises(NotFoundError):
        container.holiday_service.delete("2024-08-15")
