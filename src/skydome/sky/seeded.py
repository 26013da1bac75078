"""Deterministic pseudo-random draws seeded from observation time and place."""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from ..models.location import Location

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def time_to_millis(time: datetime) -> int:
    """Convert a datetime to integer milliseconds since the Unix epoch.

    Args:
        time: Observation time (naive values are taken as UTC)

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z
    """
    if time.tzinfo is None:
        time = time.replace(tzinfo=timezone.utc)
    return (time - _EPOCH) // timedelta(milliseconds=1)


def seed_for(time: datetime, location: Location) -> float:
    """Derive the sequence seed for a (time, location) pair.

    seed = time_ms + latitude * 100 + longitude
    """
    return time_to_millis(time) + location.latitude * 100 + location.longitude


@dataclass(frozen=True)
class SeededSequence:
    """Sine-hash sequence with an explicit counter.

    The value for a counter n is frac(sin(seed + n) * 10000). Callers pass the
    counter explicitly so the same (seed, n) always gives the same draw.
    """

    seed: float

    def draw(self, counter: int) -> float:
        """Return a value in [0, 1) for the given counter.

        Args:
            counter: Number of stars generated before this draw

        Returns:
            Fractional part of sin(seed + counter) * 10000
        """
        x = math.sin(self.seed + counter) * 10000
        return x - math.floor(x)
