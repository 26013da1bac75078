"""Light and dark color palettes for the sky dome."""

from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

SECONDARY_OPACITY = 0.3


@dataclass(frozen=True)
class Palette:
    background: RGB
    foreground: RGB
    secondary: RGBA

    @classmethod
    def for_scheme(cls, color_scheme: str) -> "Palette":
        """Build the palette for "light" or "dark".

        Every color derives from the single scheme flag.
        """
        if color_scheme not in ("light", "dark"):
            raise ValueError(f"Unknown color scheme: {color_scheme}")

        if color_scheme == "dark":
            background = (2, 8, 23)
            foreground = (255, 255, 255)
        else:
            background = (255, 255, 255)
            foreground = (0, 0, 0)

        alpha = int(SECONDARY_OPACITY * 255 + 0.5)
        return cls(
            background=background,
            foreground=foreground,
            secondary=(*foreground, alpha),
        )
