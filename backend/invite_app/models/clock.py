"""Timestamp source shared by the models and stores."""
from datetime import datetime, timezone


def utcnow() -> datetime:
    # Application-side clock keeps microseconds; CURRENT_TIMESTAMP in SQLite does not
    return datetime.now(timezone.utc)
