"""Polar azimuth/altitude projection of the sky dome onto a flat canvas."""

import math
from typing import Optional, Tuple

EDGE_PADDING_PX = 30.0


class DomeProjection:
    """Maps (altitude, azimuth) onto pixel coordinates.

    The zenith sits at the canvas center and the horizon on a circle of
    `dome_radius` pixels (scaled by zoom for sky objects). North is up and
    azimuth increases clockwise, so east is to the right.
    """

    def __init__(self, width: int, height: int, zoom: float = 1.0):
        self.width = width
        self.height = height
        self.zoom = zoom

        self.center_x = width / 2
        self.center_y = height / 2
        self.padding = EDGE_PADDING_PX / zoom
        self.dome_radius = min(width, height) / 2 - self.padding

    def project(self, altitude: float, azimuth: float) -> Tuple[float, float]:
        """Project a sky position to canvas coordinates.

        Args:
            altitude: Degrees above the horizon (90 = zenith)
            azimuth: Degrees clockwise from north

        Returns:
            (x, y) pixel coordinates, y growing downwards
        """
        azimuth_rad = azimuth * math.pi / 180
        altitude_ratio = (90 - altitude) / 90
        distance = altitude_ratio * self.dome_radius * self.zoom

        x = self.center_x + distance * math.sin(azimuth_rad)
        y = self.center_y - distance * math.cos(azimuth_rad)
        return x, y

    def in_bounds(self, x: float, y: float) -> bool:
        return 0 <= x <= self.width and 0 <= y <= self.height

    def visible_point(
        self, altitude: float, azimuth: float
    ) -> Optional[Tuple[float, float]]:
        """Project a position if it is above the horizon and lands on the canvas."""
        if altitude <= 0:
            return None

        x, y = self.project(altitude, azimuth)
        if not self.in_bounds(x, y):
            return None
        return x, y

    def is_drawable(self, altitude: float, azimuth: float) -> bool:
        return self.visible_point(altitude, azimuth) is not None

    def ring_radius(self, altitude: float) -> float:
        """Radius of the reference ring for an altitude (not scaled by zoom)."""
        return self.dome_radius * (1 - altitude / 90)
