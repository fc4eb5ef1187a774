"""Timezone utilities for displaying submission times in clinic local time"""
from datetime import datetime
import pytz

DISPLAY_FORMAT = "%Y-%m-%d %H:%M"


def to_clinic_time(timestamp: str, timezone_name: str) -> str:
    """
    Render an ISO-8601 timestamp in the clinic's timezone.

    Args:
        timestamp: ISO string; naive values are assumed to be UTC
        timezone_name: pytz zone name, e.g. 'Asia/Riyadh'

    Returns:
        Formatted local time, or the input unchanged if it cannot be parsed
    """
    try:
        dt = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return str(timestamp)

    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    local = dt.astimezone(pytz.timezone(timezone_name))
    return f"{local.strftime(DISPLAY_FORMAT)} ({timezone_name})"
