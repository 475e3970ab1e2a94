from library_lending.errors import ValidationError


def required_text(value, field: str) -> str:
    """Non-blank text; numbers are accepted and stringified."""
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValidationError(f"{field} is required")
    return text


def optional_int(value, field: str):
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be an integer")
