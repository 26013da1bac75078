from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .constellation import Constellation
    from .location import Location
    from .star import Star


@dataclass(frozen=True)
class SkySnapshot:
    stars: tuple["Star", ...]
    constellations: tuple["Constellation", ...]
    time: datetime
    location: "Location"

    def visible_stars(self) -> tuple["Star", ...]:
        return tuple(star for star in self.stars if star.is_visible)
