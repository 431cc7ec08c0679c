"""Time helpers shared by models and services."""
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the storage convention for all columns)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)
