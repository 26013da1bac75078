from .cities import POPULAR_CITIES, find_city, search_cities
from .coordinates import format_coordinates, make_location, validate_coordinate

__all__ = [
    "POPULAR_CITIES",
    "find_city",
    "search_cities",
    "format_coordinates",
    "make_location",
    "validate_coordinate",
]
