from .engine import (
    SkyRenderer,
    render_sky,
    render_sky_to_pil,
    star_radius,
    validate_options,
)
from .palette import Palette
from .projection import DomeProjection

__all__ = [
    "SkyRenderer",
    "render_sky",
    "render_sky_to_pil",
    "star_radius",
    "validate_options",
    "Palette",
    "DomeProjection",
]
