from .seeded import SeededSequence, seed_for, time_to_millis
from .stars import NAMED_STARS, generate_stars, is_night_hour
from .constellations import CONSTELLATION_PATTERNS, build_constellations
from .generator import generate_sky

__all__ = [
    "SeededSequence",
    "seed_for",
    "time_to_millis",
    "NAMED_STARS",
    "generate_stars",
    "is_night_hour",
    "CONSTELLATION_PATTERNS",
    "build_constellations",
    "generate_sky",
]
