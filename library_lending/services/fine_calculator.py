from datetime import datetime

from library_lending.errors import ValidationError

DAILY_FINE = 10


def days_late(due_date: datetime, return_date: datetime) -> int:
    """
    Whole calendar days between due date and return date.
    Hours are ignored: a return later on the due day is 0 days late,
    a return just after midnight is 1 day late.
    """
    if return_date <= due_date:
        return 0
    return max(0, (return_date.date() - due_date.date()).days)


def calculate_fine(due_date: datetime, return_date: datetime, daily_rate: int = DAILY_FINE) -> int:
    if daily_rate < 0:
        raise ValidationError("daily_rate must not be negative")
    return days_late(due_date, return_date) * daily_rate
