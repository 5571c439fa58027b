# app/utils/date_helpers.py
from datetime import datetime, timezone

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def current_timestamp() -> str:
    """Timestamp string stored on records, e.g. '2024-05-01 13:45:00' (UTC)."""
    return utc_now().strftime(TIMESTAMP_FORMAT)
