import pytest

from src.clinic_attendance.clinic_attendance.attendance.keys import compose_key, split_key
from src.clinic_attendance.clinic_attendance.core.exceptions import ValidationError


def test_compose_slot_and_daily_keys():
    assert compose_key("Dr. A", 2) == "Dr. A_Slot2"
    assert compose_key("Ms. Maid", 0) == "Ms. Maid_Daily"


@pytest.mark.parametrize(
    "key, expected",
    [
        ("Dr. A_Slot2", ("Dr. A", 2)),
        ("Ms. Maid_Daily", ("Ms. Maid", 0)),
        ("Mr. X_Slotted_Slot3", ("Mr. X_Slotted", 3)),
        ("Mr. Y_SlotA", ("Mr. Y_SlotA", 0)),
        ("Plain Name", ("Plain Name", 0)),
    ],
)
def test_split_key(key, expected):
    assert split_key(key) == expected


def test_split_key_round_trips_names_with_separator():
    name = "Dr. Odd_Slot9 Name"
    assert split_key(compose_key(name, 4)) == (name, 4)


def test_empty_key_is_rejected():
    with pytest.raises(ValidationError):
        split_key("  ")
