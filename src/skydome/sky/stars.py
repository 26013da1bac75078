"""Star field generation: 200 generic stars followed by 10 named bright stars."""

from datetime import datetime

from ..models.location import Location
from ..models.star import Star
from .seeded import SeededSequence, seed_for

GENERIC_STAR_COUNT = 200

# Named bright stars (name, visual magnitude), placed evenly around the compass
NAMED_STARS = (
    ("Polaris", 2.0),
    ("Vega", 0.03),
    ("Sirius", -1.46),
    ("Betelgeuse", 0.5),
    ("Rigel", 0.13),
    ("Arcturus", -0.05),
    ("Antares", 1.09),
    ("Aldebaran", 0.87),
    ("Spica", 1.04),
    ("Deneb", 1.25),
)

DAYTIME_ALTITUDE_SCALE = 0.7
DAYTIME_ALTITUDE_SHIFT = -20.0


def is_night_hour(hour: int) -> bool:
    """Night runs from 18:00 through 06:59 local wall-clock time."""
    return hour >= 18 or hour <= 6


def generate_stars(time: datetime, location: Location) -> list[Star]:
    """Generate the full star list for a time and location.

    Every draw for a star uses the count of stars generated so far as its
    counter, so altitude, azimuth and magnitude of one generic star come from
    the same draw value.

    Args:
        time: Observation time; its own hour decides day or night
        location: Observer location

    Returns:
        List of 200 generic stars followed by the named stars, in order
    """
    sequence = SeededSequence(seed_for(time, location))
    night = is_night_hour(time.hour)
    stars: list[Star] = []

    for i in range(GENERIC_STAR_COUNT):
        altitude = 90 - abs(sequence.draw(len(stars)) * 180 - 90)
        if not night:
            altitude = altitude * DAYTIME_ALTITUDE_SCALE + DAYTIME_ALTITUDE_SHIFT

        azimuth = sequence.draw(len(stars)) * 360
        magnitude = sequence.draw(len(stars)) * 5 + 1

        stars.append(
            Star(
                id=f"star-{i}",
                magnitude=magnitude,
                altitude=altitude,
                azimuth=azimuth,
            )
        )

    for i, (name, magnitude) in enumerate(NAMED_STARS):
        altitude = 30 + sequence.draw(len(stars)) * 50
        azimuth = (i / len(NAMED_STARS)) * 360

        stars.append(
            Star(
                id=f"named-star-{i}",
                name=name,
                magnitude=magnitude,
                altitude=altitude,
                azimuth=azimuth,
            )
        )

    return stars
