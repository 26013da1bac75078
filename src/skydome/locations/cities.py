"""Static table of popular cities with substring search."""

from ..errors import CityNotFoundError
from ..models.location import Location

POPULAR_CITIES = (
    Location(latitude=40.7128, longitude=-74.006, name="New York, USA"),
    Location(latitude=34.0522, longitude=-118.2437, name="Los Angeles, USA"),
    Location(latitude=41.8781, longitude=-87.6298, name="Chicago, USA"),
    Location(latitude=29.7604, longitude=-95.3698, name="Houston, USA"),
    Location(latitude=43.6532, longitude=-79.3832, name="Toronto, Canada"),
    Location(latitude=45.5017, longitude=-73.5673, name="Montreal, Canada"),
    Location(latitude=19.4326, longitude=-99.1332, name="Mexico City, Mexico"),
    Location(latitude=-22.9068, longitude=-43.1729, name="Rio de Janeiro, Brazil"),
    Location(latitude=-23.5505, longitude=-46.6333, name="São Paulo, Brazil"),
    Location(latitude=-34.6037, longitude=-58.3816, name="Buenos Aires, Argentina"),
    Location(latitude=-33.4489, longitude=-70.6693, name="Santiago, Chile"),
    Location(latitude=-12.0464, longitude=-77.0428, name="Lima, Peru"),
    Location(latitude=4.711, longitude=-74.0721, name="Bogotá, Colombia"),
    Location(latitude=51.5074, longitude=-0.1278, name="London, UK"),
    Location(latitude=48.8566, longitude=2.3522, name="Paris, France"),
    Location(latitude=52.52, longitude=13.405, name="Berlin, Germany"),
    Location(latitude=41.9028, longitude=12.4964, name="Rome, Italy"),
    Location(latitude=40.4168, longitude=-3.7038, name="Madrid, Spain"),
    Location(latitude=55.7558, longitude=37.6173, name="Moscow, Russia"),
    Location(latitude=59.3293, longitude=18.0686, name="Stockholm, Sweden"),
    Location(latitude=52.3676, longitude=4.9041, name="Amsterdam, Netherlands"),
    Location(latitude=48.2082, longitude=16.3738, name="Vienna, Austria"),
    Location(latitude=50.0755, longitude=14.4378, name="Prague, Czech Republic"),
    Location(latitude=47.4979, longitude=19.0402, name="Budapest, Hungary"),
    Location(latitude=38.7223, longitude=-9.1393, name="Lisbon, Portugal"),
    Location(latitude=55.6761, longitude=12.5683, name="Copenhagen, Denmark"),
    Location(latitude=59.9139, longitude=10.7522, name="Oslo, Norway"),
    Location(latitude=60.1699, longitude=24.9384, name="Helsinki, Finland"),
    Location(latitude=37.9838, longitude=23.7275, name="Athens, Greece"),
    Location(latitude=41.0082, longitude=28.9784, name="Istanbul, Turkey"),
    Location(latitude=35.6762, longitude=139.6503, name="Tokyo, Japan"),
    Location(latitude=39.9042, longitude=116.4074, name="Beijing, China"),
    Location(latitude=31.2304, longitude=121.4737, name="Shanghai, China"),
    Location(latitude=22.3193, longitude=114.1694, name="Hong Kong"),
    Location(latitude=1.3521, longitude=103.8198, name="Singapore"),
    Location(latitude=28.6139, longitude=77.209, name="New Delhi, India"),
    Location(latitude=19.076, longitude=72.8777, name="Mumbai, India"),
    Location(latitude=3.139, longitude=101.6869, name="Kuala Lumpur, Malaysia"),
    Location(latitude=13.7563, longitude=100.5018, name="Bangkok, Thailand"),
    Location(latitude=14.5995, longitude=120.9842, name="Manila, Philippines"),
    Location(latitude=37.5665, longitude=126.978, name="Seoul, South Korea"),
    Location(latitude=25.033, longitude=121.5654, name="Taipei, Taiwan"),
    Location(latitude=33.3152, longitude=44.3661, name="Baghdad, Iraq"),
    Location(latitude=24.8607, longitude=67.0011, name="Karachi, Pakistan"),
    Location(latitude=35.6892, longitude=51.389, name="Tehran, Iran"),
    Location(latitude=25.2048, longitude=55.2708, name="Dubai, UAE"),
    Location(latitude=30.0444, longitude=31.2357, name="Cairo, Egypt"),
    Location(latitude=33.9716, longitude=-6.8498, name="Rabat, Morocco"),
    Location(latitude=6.5244, longitude=3.3792, name="Lagos, Nigeria"),
    Location(latitude=-1.2921, longitude=36.8219, name="Nairobi, Kenya"),
    Location(latitude=-33.9249, longitude=18.4241, name="Cape Town, South Africa"),
    Location(latitude=-26.2041, longitude=28.0473, name="Johannesburg, South Africa"),
    Location(latitude=36.8065, longitude=10.1815, name="Tunis, Tunisia"),
    Location(latitude=9.0765, longitude=7.3986, name="Abuja, Nigeria"),
    Location(latitude=-33.8688, longitude=151.2093, name="Sydney, Australia"),
    Location(latitude=-37.8136, longitude=144.9631, name="Melbourne, Australia"),
    Location(latitude=-31.9505, longitude=115.8605, name="Perth, Australia"),
    Location(latitude=-36.8485, longitude=174.7633, name="Auckland, New Zealand"),
)

SEARCH_RESULT_LIMIT = 15


def search_cities(query: str, limit: int = SEARCH_RESULT_LIMIT) -> list[Location]:
    """Case-insensitive substring search over the city table.

    Args:
        query: Text to look for in city names
        limit: Maximum number of matches returned

    Returns:
        Matching cities in table order (empty for a blank query)
    """
    needle = query.strip().lower()
    if not needle:
        return []

    matches = [city for city in POPULAR_CITIES if needle in city.name.lower()]
    return matches[:limit]


def find_city(name: str) -> Location:
    """Resolve a city name to a single location.

    An exact (case-insensitive) name wins; otherwise the query must match
    exactly one city.

    Raises:
        CityNotFoundError: If nothing or more than one city matches
    """
    wanted = name.strip().lower()
    for city in POPULAR_CITIES:
        if city.name.lower() == wanted:
            return city

    matches = search_cities(name)
    if len(matches) == 1:
        return matches[0]

    raise CityNotFoundError(name, [city.name for city in matches])
