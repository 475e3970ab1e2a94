from datetime import date, datetime, time, timezone

from library_lending.errors import ValidationError


def utc_now() -> datetime:
    """Naive UTC, the form every timestamp column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_today() -> date:
    return utc_now().date()


def _to_naive_utc(dt: datetime) -> datetime:
    # the columns are naive; offset-aware input is shifted to UTC first
    if dt.tzinfo is not None and dt.utcoffset() is not None:
        return dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt.replace(tzinfo=None)


def as_datetime(value):
    """date -> midnight datetime, datetime passes through as naive UTC."""
    if isinstance(value, datetime):
        return _to_naive_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    raise ValidationError(f"Expected a date or datetime, got {value!r}")


def parse_datetime(value, field: str):
    """
    Converts a JSON body value to datetime.
    Both '2024-06-01' and '2024-06-01T10:00:00' are accepted,
    '2024-06-01T10:00:00+02:00' is stored as 08:00 UTC.
    None -> None (the caller decides whether the field is optional)
    """
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return as_datetime(value)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return _to_naive_utc(datetime.fromisoformat(text))
    except ValueError:
        raise ValidationError(f"{field} must be an ISO-8601 date: {value!r}")


def parse_date(value, field: str):
    dt = parse_datetime(value, field)
    return dt.date() if dt is not None else None
