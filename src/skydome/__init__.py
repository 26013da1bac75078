"""Approximate sky-dome rendering for an observer location and time."""

__version__ = "0.1.0"

from .view import SkyView

__all__ = ["SkyView", "__version__"]
