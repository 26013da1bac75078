from .location import Location
from .star import SkyPosition, Star
from .constellation import Constellation, ConstellationLine
from .snapshot import SkySnapshot
from .options import ColorScheme, RenderOptions

__all__ = [
    "Location",
    "Star",
    "SkyPosition",
    "Constellation",
    "ConstellationLine",
    "SkySnapshot",
    "ColorScheme",
    "RenderOptions",
]
