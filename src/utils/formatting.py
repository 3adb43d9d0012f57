from datetime import datetime, timezone

from core.constants import DATE_FORMAT


def as_utc(value: datetime | None) -> datetime | None:
    """Naive values are taken to be UTC, aware ones are converted to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_date(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.strftime(DATE_FORMAT)
