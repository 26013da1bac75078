"""Observation time parsing and time-of-day presets."""

from datetime import datetime, timezone
from typing import Optional

from .errors import TimeParseError

# Preset name -> (hour, minute); "now" takes the current time instead
TIME_PRESETS = {
    "midnight": (0, 0),
    "sunset": (19, 30),
    "sunrise": (5, 30),
}


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp.

    Args:
        value: Timestamp such as "2024-06-21T22:00:00Z"

    Returns:
        Timezone-aware datetime (naive input is taken as UTC)

    Raises:
        TimeParseError: If value cannot be parsed
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        raise TimeParseError(value)

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def apply_time_preset(time: Optional[datetime], preset: str) -> datetime:
    """Move a time to a named time of day, keeping its date and zone.

    Args:
        time: Base time (None means the current UTC time)
        preset: One of "now", "midnight", "sunset", "sunrise"

    Returns:
        Adjusted datetime with seconds and microseconds cleared for fixed presets

    Raises:
        TimeParseError: If preset is not recognized
    """
    key = preset.strip().lower()
    if key == "now":
        return datetime.now(timezone.utc)

    if key not in TIME_PRESETS:
        raise TimeParseError(preset)

    base = time or datetime.now(timezone.utc)
    hour, minute = TIME_PRESETS[key]
    return base.replace(hour=hour, minute=minute, second=0, microsecond=0)
