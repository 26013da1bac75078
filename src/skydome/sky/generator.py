"""Sky snapshot generation for a single (time, location) pair."""

from datetime import datetime

from ..models.location import Location
from ..models.snapshot import SkySnapshot
from .constellations import build_constellations
from .stars import generate_stars


def generate_sky(time: datetime, location: Location) -> SkySnapshot:
    """Generate a complete sky snapshot.

    The result depends only on its arguments: repeated calls with the same
    time and location produce identical stars and constellations.

    Args:
        time: Observation time, already validated by the caller
        location: Observer location, already validated by the caller

    Returns:
        SkySnapshot with stars, constellations, time and location
    """
    stars, constellations = build_constellations(generate_stars(time, location))

    return SkySnapshot(
        stars=tuple(stars),
        constellations=tuple(constellations),
        time=time,
        location=location,
    )
