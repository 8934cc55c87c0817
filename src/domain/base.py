from datetime import UTC, datetime
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(UTC)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a timestamp read back from the database to aware UTC.

    SQLite drops tzinfo on DateTime columns, PostgreSQL keeps it.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
