from datetime import datetime, timezone


def ensure_utc(value: datetime) -> datetime:
    # Naive datetimes are stored and compared as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_iso(value: datetime) -> str:
    """Format as ISO-8601 UTC with millisecond precision, e.g. 2024-06-10T00:00:00.000Z."""
    return ensure_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_datetime(value: str | datetime) -> datetime:
    """Parse a stored booking date (ISO string or BSON date) into an aware UTC datetime.

    Raises ValueError if the value is not a recognizable date.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))
