from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.snapshot import SkySnapshot


def format_time(time: datetime) -> str:
    """Format an observation time for display, e.g. "2024-06-21 22:00:00 UTC"."""
    zone = time.tzname() if time.tzinfo is not None else "UTC"
    return f"{time.strftime('%Y-%m-%d %H:%M:%S')} {zone}"


def generate_caption(snapshot: "SkySnapshot") -> str:
    """Generate a caption describing the rendered sky.

    Args:
        snapshot: Sky snapshot containing location, time, stars and constellations.

    Returns:
        Human-readable caption string.
    """
    location = snapshot.location
    parts = [
        f"Sky over {location.name} "
        f"({location.latitude:.2f}, {location.longitude:.2f})"
    ]
    parts.append(f"at {format_time(snapshot.time)}")

    visible = len(snapshot.visible_stars())
    parts.append(f"{visible} of {len(snapshot.stars)} stars above the horizon")

    if snapshot.constellations:
        names = ", ".join(c.name for c in snapshot.constellations)
        parts.append(f"Constellations: {names}")
    else:
        parts.append("No constellations visible")

    return ". ".join(parts) + "."
