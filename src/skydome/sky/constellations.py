"""Constellation patterns carved out of the visible star list."""

from dataclasses import dataclass, replace

from ..models.constellation import Constellation, ConstellationLine
from ..models.star import SkyPosition, Star


@dataclass(frozen=True)
class ConstellationPattern:
    name: str
    start: int
    offsets: tuple[tuple[float, float], ...]  # (d_altitude, d_azimuth) per slot
    edges: tuple[tuple[int, int], ...]

    @property
    def stop(self) -> int:
        return self.start + len(self.offsets)


CONSTELLATION_PATTERNS = (
    ConstellationPattern(
        name="Ursa Major",
        start=0,
        offsets=(
            (0, -5),
            (0, -2),
            (0, 2),
            (0, 5),
            (-3, 0),
            (-5, 0),
            (-7, 0),
        ),
        edges=((0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6)),
    ),
    ConstellationPattern(
        name="Orion",
        start=7,
        offsets=(
            (5, -5),  # Betelgeuse
            (5, 5),  # Bellatrix
            (2, -3),  # Mintaka
            (2, 0),  # Alnilam
            (2, 3),  # Alnitak
            (-3, -5),  # Saiph
            (-3, 5),  # Rigel
        ),
        edges=(
            (0, 1),
            (1, 2),
            (2, 3),
            (3, 4),
            (4, 5),
            (5, 6),
            (6, 1),
            (0, 3),
            (3, 5),
        ),
    ),
    ConstellationPattern(
        name="Cassiopeia",
        start=14,
        offsets=(
            (0, -8),
            (-3, -4),
            (3, 0),
            (-3, 4),
            (0, 8),
        ),
        edges=((0, 1), (1, 2), (2, 3), (3, 4)),
    ),
)


def build_constellations(
    stars: list[Star],
) -> tuple[list[Star], list[Constellation]]:
    """Shape constellations from consecutive runs of visible stars.

    The visible list is taken once, before any offsets. A pattern is built
    only if that list holds at least `pattern.stop` stars. Offsets are
    written back into the shared star list: the offset copy replaces the
    original at the same position, so a star that joins a constellation ends
    up at its shifted position everywhere in the snapshot.

    Args:
        stars: Generated stars in generation order

    Returns:
        Tuple of (star list with offsets applied, constellations)
    """
    stars = list(stars)
    visible_indices = [i for i, star in enumerate(stars) if star.is_visible]
    constellations: list[Constellation] = []

    for pattern in CONSTELLATION_PATTERNS:
        if len(visible_indices) < pattern.stop:
            continue

        members = visible_indices[pattern.start : pattern.stop]
        shaped: list[Star] = []
        for index, (d_altitude, d_azimuth) in zip(members, pattern.offsets):
            star = stars[index]
            star = replace(
                star,
                altitude=star.altitude + d_altitude,
                azimuth=star.azimuth + d_azimuth,
            )
            stars[index] = star
            shaped.append(star)

        lines = tuple(
            ConstellationLine(start=shaped[a], end=shaped[b]) for a, b in pattern.edges
        )
        center = SkyPosition(
            altitude=sum(star.altitude for star in shaped) / len(shaped),
            azimuth=sum(star.azimuth for star in shaped) / len(shaped),
        )
        constellations.append(
            Constellation(name=pattern.name, lines=lines, center=center)
        )

    return stars, constellations
