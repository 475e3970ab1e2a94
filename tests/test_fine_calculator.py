from datetime import date, datetime

import pytest

from library_lending.errors import ValidationError
from library_lending.services.fine_calculator import calculate_fine, days_late


def test_on_time_return_has_no_fine():
    due = datetime(2024, 6, 15)
    assert calculate_fine(due, due) == 0
    assert calculate_fine(due, datetime(2024, 6, 10, 9, 30)) == 0


def test_five_days_late():
    assert calculate_fine(datetime(2024, 6, 15), datetime(2024, 6, 20)) == 50


def test_more_than_a_year_late():
    due = datetime(2024, 6, 15)
    returned = datetime(2025, 6, 20)
    expected = 10 * (date(2025, 6, 20) - date(2024, 6, 15)).days
    assert calculate_fine(due, returned) == expected == 3700


def test_hours_late_on_same_day_is_free():
    due = datetime(2024, 6, 15, 0, 0)
    assert calculate_fine(due, datetime(2024, 6, 15, 23, 0)) == 0


def test_lateness_counts_calendar_days():
    # one minute after midnight is already the next calendar day
    due = datetime(2024, 5, 15, 23, 59, 59)
    assert days_late(due, datetime(2024, 5, 16, 0, 1)) == 1
    assert calculate_fine(due, datetime(2024, 5, 16, 0, 1)) == 10


def test_custom_daily_rate():
    assert calculate_fine(datetime(2024, 1, 1), datetime(2024, 1, 4), daily_rate=25) == 75


def test_negative_rate_is_rejected():
    with pytest.raises(ValidationError):
        calculate_fine(datetime(2024, 1, 1), datetime(2024, 1, 4), daily_rate=-1)


def test_deterministic():
    due, returned = datetime(2024, 3, 1, 12), datetime(2024, 3, 9, 8)
    assert calculate_fine(due, returned) == calculate_fine(due, returned) == 80
