from dataclasses import dataclass

from .star import SkyPosition, Star


@dataclass(frozen=True)
class ConstellationLine:
    start: Star
    end: Star


@dataclass(frozen=True)
class Constellation:
    name: str
    lines: tuple[ConstellationLine, ...]
    center: SkyPosition

    def stars(self) -> tuple[Star, ...]:
        """Distinct stars touched by the lines, in first-seen order."""
        seen: dict[int, Star] = {}
        for line in self.lines:
            for star in (line.start, line.end):
                seen.setdefault(id(star), star)
        return tuple(seen.values())
