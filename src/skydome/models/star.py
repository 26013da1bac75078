from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Star:
    id: str
    magnitude: float
    altitude: float
    azimuth: float
    name: Optional[str] = None

    @property
    def is_visible(self) -> bool:
        return self.altitude > 0


@dataclass(frozen=True)
class SkyPosition:
    altitude: float
    azimuth: float
