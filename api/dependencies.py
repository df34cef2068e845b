"""API Dependencies"""
from datetime import datetime, timezone


def get_today() -> str:
    """Current UTC calendar date as an ISO string, used for booked status"""
    return datetime.now(timezone.utc).date().isoformat()
