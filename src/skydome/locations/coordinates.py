"""Latitude/longitude validation and formatting."""

import math
from typing import Literal, Optional

from ..errors import CoordinateError
from ..models.location import Location

CoordinateField = Literal["latitude", "longitude"]

_LIMITS = {"latitude": 90.0, "longitude": 180.0}


def validate_coordinate(field: CoordinateField, value: object) -> Optional[str]:
    """Check a latitude or longitude value.

    Args:
        field: "latitude" or "longitude"
        value: Number or numeric string

    Returns:
        Error message, or None when the value is acceptable
    """
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return "Must be a valid number"

    if math.isnan(number):
        return "Must be a valid number"

    limit = _LIMITS[field]
    if number < -limit or number > limit:
        return f"{field.capitalize()} must be between {-limit:g} and {limit:g}"

    return None


def make_location(
    latitude: object, longitude: object, name: Optional[str] = None
) -> Location:
    """Build a validated Location.

    A blank name is replaced by the coordinates to four decimals.

    Raises:
        CoordinateError: If either coordinate is invalid
    """
    for field, value in (("latitude", latitude), ("longitude", longitude)):
        reason = validate_coordinate(field, value)
        if reason is not None:
            raise CoordinateError(field, value, reason)

    lat = float(latitude)  # type: ignore[arg-type]
    lon = float(longitude)  # type: ignore[arg-type]
    label = (name or "").strip() or f"{lat:.4f}, {lon:.4f}"
    return Location(latitude=lat, longitude=lon, name=label)


def format_coordinates(latitude: float, longitude: float) -> str:
    """Format coordinates as e.g. "40.71° N, 74.01° W"."""
    lat_dir = "N" if latitude >= 0 else "S"
    lon_dir = "E" if longitude >= 0 else "W"
    return f"{abs(latitude):.2f}° {lat_dir}, {abs(longitude):.2f}° {lon_dir}"
