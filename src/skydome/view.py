"""Committed view state: inputs, current snapshot and the last rendered frame."""

from dataclasses import replace
from datetime import datetime
from typing import Optional

import numpy as np

from .models.location import Location
from .models.options import ColorScheme, RenderOptions
from .models.snapshot import SkySnapshot
from .renderer.engine import SkyRenderer, validate_options
from .sky.generator import generate_sky


class SkyView:
    """Holds the last committed inputs and recomputes on change.

    A new time or location replaces the snapshot wholesale. Zoom, color
    scheme and viewport changes keep the snapshot. Any change drops the
    cached frame so the next `frame()` redraws the whole surface.
    """

    def __init__(
        self,
        time: datetime,
        location: Location,
        options: Optional[RenderOptions] = None,
    ):
        self._options = options or RenderOptions()
        validate_options(self._options)
        self._time = time
        self._location = location
        self._snapshot = generate_sky(time, location)
        self._frame: Optional[np.ndarray] = None

    @property
    def time(self) -> datetime:
        return self._time

    @property
    def location(self) -> Location:
        return self._location

    @property
    def options(self) -> RenderOptions:
        return self._options

    @property
    def snapshot(self) -> SkySnapshot:
        return self._snapshot

    @property
    def is_stale(self) -> bool:
        return self._frame is None

    def set_time(self, time: datetime) -> None:
        # Equal instants in different zones have different wall-clock hours
        if time == self._time and time.utcoffset() == self._time.utcoffset():
            return
        self._snapshot = generate_sky(time, self._location)
        self._time = time
        self._frame = None

    def set_location(self, location: Location) -> None:
        if location == self._location:
            return
        self._snapshot = generate_sky(self._time, location)
        self._location = location
        self._frame = None

    def set_zoom(self, zoom: float) -> None:
        self._update_options(replace(self._options, zoom=zoom))

    def set_color_scheme(self, color_scheme: ColorScheme) -> None:
        self._update_options(replace(self._options, color_scheme=color_scheme))

    def resize(self, width: int, height: int) -> None:
        self._update_options(replace(self._options, width=width, height=height))

    def _update_options(self, options: RenderOptions) -> None:
        # Raises ValueError before anything is committed
        validate_options(options)
        if options == self._options:
            return
        self._options = options
        self._frame = None

    def frame(self) -> np.ndarray:
        """Return the current frame, redrawing from scratch if anything changed."""
        if self._frame is None:
            self._frame = SkyRenderer(self._options).render(self._snapshot)
        return self._frame
