"""CPU-only raster renderer for the sky dome."""

import math
from functools import lru_cache
from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from ..models.constellation import Constellation
from ..models.options import RenderOptions
from ..models.snapshot import SkySnapshot
from ..models.star import Star
from .palette import Palette
from .projection import DomeProjection

STAR_BRIGHTNESS = 0.9
GLOW_MAGNITUDE_LIMIT = 2.0
LABEL_MAGNITUDE_LIMIT = 3.0
REFERENCE_ALTITUDES = (30, 60)
PLACEHOLDER_TEXT = "Loading sky data..."


def star_radius(magnitude: float, zoom: float = 1.0) -> float:
    """Disc radius in pixels for a star of the given magnitude."""
    return max(1.0, 2.5 * (magnitude / 6) * STAR_BRIGHTNESS * zoom)


@lru_cache(maxsize=16)
def _font(size: float) -> ImageFont.ImageFont:
    return ImageFont.load_default(size=size)


def validate_options(options: RenderOptions) -> None:
    """Check viewport size, zoom and color scheme.

    Raises:
        ValueError: If any option is out of range
    """
    if options.width < 1:
        raise ValueError("Width must be at least 1 pixel")
    if options.height < 1:
        raise ValueError("Height must be at least 1 pixel")
    if not options.zoom > 0:
        raise ValueError("Zoom must be positive")
    Palette.for_scheme(options.color_scheme)


class SkyRenderer:
    """Sky-dome renderer.

    Each call to `render` clears the surface and redraws everything: stars,
    constellation lines and labels, then the reference overlay.
    """

    def __init__(self, options: Optional[RenderOptions] = None):
        """Initialize renderer.

        Args:
            options: Viewport size, zoom and color scheme (defaults to 800x800, dark)
        """
        options = options or RenderOptions()
        validate_options(options)

        self.options = options
        self.width = options.width
        self.height = options.height
        self.zoom = options.zoom
        self.palette = Palette.for_scheme(options.color_scheme)
        self.projection = DomeProjection(self.width, self.height, self.zoom)

    def render(self, snapshot: Optional[SkySnapshot]) -> np.ndarray:
        """Render a sky snapshot.

        Args:
            snapshot: Sky state to draw, or None before the first generation

        Returns:
            8-bit RGB image array with shape (height, width, 3)
        """
        canvas = np.empty((self.height, self.width, 3), dtype=np.float32)
        canvas[:, :] = np.array(self.palette.background, dtype=np.float32) / 255.0

        if snapshot is None:
            image = Image.fromarray(_to_8bit(canvas))
            self._draw_placeholder(ImageDraw.Draw(image, "RGBA"))
            return np.array(image)

        labels = []
        for star in snapshot.stars:
            point = self.projection.visible_point(star.altitude, star.azimuth)
            if point is None:
                continue

            self._draw_star(canvas, star, point)
            if star.name and star.magnitude < LABEL_MAGNITUDE_LIMIT:
                labels.append((star.name, point))

        image = Image.fromarray(_to_8bit(canvas))
        draw = ImageDraw.Draw(image, "RGBA")

        for name, (x, y) in labels:
            draw.text(
                (x, y + 12 * self.zoom),
                name,
                fill=self.palette.foreground,
                font=_font(max(10, 10 * self.zoom)),
                anchor="ms",
            )

        for constellation in snapshot.constellations:
            self._draw_constellation(draw, constellation)

        self._draw_reference_overlay(draw)

        return np.array(image)

    def _draw_star(
        self, canvas: np.ndarray, star: Star, point: Tuple[float, float]
    ) -> None:
        """Composite a star disc and, for bright stars, its glow onto the canvas.

        The disc gradient runs from full color at the center through 45%
        opacity at the disc edge towards transparent at twice the radius.
        """
        x, y = point
        radius = star_radius(star.magnitude, self.zoom)
        color = np.array(self.palette.foreground, dtype=np.float32) / 255.0

        self._composite_gradient(
            canvas,
            x,
            y,
            clip_radius=radius,
            gradient_radius=radius * 2,
            offsets=(0.0, 0.5, 1.0),
            alphas=(1.0, 0.5 * STAR_BRIGHTNESS, 0.0),
            color=color,
        )

        if star.magnitude < GLOW_MAGNITUDE_LIMIT:
            self._composite_gradient(
                canvas,
                x,
                y,
                clip_radius=radius * 3,
                gradient_radius=radius * 3,
                offsets=(0.0, 1.0),
                alphas=(0.2 * STAR_BRIGHTNESS, 0.0),
                color=color,
            )

    def _composite_gradient(
        self,
        canvas: np.ndarray,
        x: float,
        y: float,
        clip_radius: float,
        gradient_radius: float,
        offsets: Tuple[float, ...],
        alphas: Tuple[float, ...],
        color: np.ndarray,
    ) -> None:
        """Alpha-blend a radial gradient disc over the canvas (vectorized)."""
        x0 = max(0, int(math.floor(x - clip_radius)))
        x1 = min(self.width, int(math.ceil(x + clip_radius)) + 1)
        y0 = max(0, int(math.floor(y - clip_radius)))
        y1 = min(self.height, int(math.ceil(y + clip_radius)) + 1)
        if x0 >= x1 or y0 >= y1:
            return

        ys, xs = np.ogrid[y0:y1, x0:x1]
        distance = np.hypot(xs + 0.5 - x, ys + 0.5 - y)

        alpha = np.interp(distance / gradient_radius, offsets, alphas)
        alpha = np.where(distance <= clip_radius, alpha, 0.0).astype(np.float32)
        alpha = alpha[:, :, np.newaxis]

        region = canvas[y0:y1, x0:x1]
        canvas[y0:y1, x0:x1] = region * (1.0 - alpha) + color * alpha

    def _draw_constellation(
        self, draw: ImageDraw.ImageDraw, constellation: Constellation
    ) -> None:
        for line in constellation.lines:
            start = self.projection.visible_point(
                line.start.altitude, line.start.azimuth
            )
            end = self.projection.visible_point(line.end.altitude, line.end.azimuth)
            if start is None or end is None:
                continue

            draw.line([start, end], fill=self.palette.secondary, width=1)

        if not constellation.lines:
            return

        center = self.projection.visible_point(
            constellation.center.altitude, constellation.center.azimuth
        )
        if center is None:
            return

        draw.text(
            center,
            constellation.name,
            fill=self.palette.foreground,
            font=_font(max(12, 12 * self.zoom)),
            anchor="ms",
        )

    def _draw_reference_overlay(self, draw: ImageDraw.ImageDraw) -> None:
        """Draw cardinal labels, the horizon circle and the altitude rings."""
        cx = self.projection.center_x
        cy = self.projection.center_y
        radius = self.projection.dome_radius
        text_color = self.palette.foreground
        line_color = self.palette.secondary

        cardinal_font = _font(12)
        for label, position in (
            ("N", (cx, cy - radius - 5)),
            ("E", (cx + radius + 5, cy)),
            ("S", (cx, cy + radius + 15)),
            ("W", (cx - radius - 5, cy)),
        ):
            draw.text(position, label, fill=text_color, font=cardinal_font, anchor="ms")

        _draw_circle(draw, cx, cy, radius, line_color)

        ring_font = _font(10)
        for altitude in REFERENCE_ALTITUDES:
            ring_radius = self.projection.ring_radius(altitude)
            _draw_circle(draw, cx, cy, ring_radius, line_color)
            draw.text(
                (cx + ring_radius, cy),
                f"{altitude}°",
                fill=text_color,
                font=ring_font,
                anchor="ms",
            )

    def _draw_placeholder(self, draw: ImageDraw.ImageDraw) -> None:
        draw.text(
            (self.projection.center_x, self.projection.center_y),
            PLACEHOLDER_TEXT,
            fill=self.palette.foreground,
            font=_font(14),
            anchor="mm",
        )


def _draw_circle(
    draw: ImageDraw.ImageDraw,
    cx: float,
    cy: float,
    radius: float,
    color: Tuple[int, int, int, int],
) -> None:
    if radius <= 0:
        return
    draw.ellipse(
        [cx - radius, cy - radius, cx + radius, cy + radius], outline=color, width=1
    )


def _to_8bit(canvas: np.ndarray) -> np.ndarray:
    """Convert a [0, 1] float canvas to 8-bit integers."""
    return np.clip(canvas * 255.0 + 0.5, 0, 255).astype(np.uint8)


def render_sky(
    snapshot: Optional[SkySnapshot], options: Optional[RenderOptions] = None
) -> np.ndarray:
    """Render a sky snapshot with the given options.

    Args:
        snapshot: Sky state to draw (None draws the placeholder)
        options: Viewport size, zoom and color scheme

    Returns:
        8-bit RGB image array with shape (height, width, 3)
    """
    renderer = SkyRenderer(options)
    return renderer.render(snapshot)


def render_sky_to_pil(
    snapshot: Optional[SkySnapshot], options: Optional[RenderOptions] = None
) -> Image.Image:
    """Render a sky snapshot and return as PIL Image.

    Args:
        snapshot: Sky state to draw (None draws the placeholder)
        options: Viewport size, zoom and color scheme

    Returns:
        PIL Image in RGB mode
    """
    return Image.fromarray(render_sky(snapshot, options))
