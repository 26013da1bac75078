import argparse
import re
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from . import __version__
from .caption.generator import format_time, generate_caption
from .errors import CoordinateError, SkyDomeError, handle_error
from .inputs import TIME_PRESETS, apply_time_preset, parse_timestamp
from .locations import find_city, format_coordinates, make_location, search_cities
from .metadata.embedder import embed_metadata
from .models import Location, RenderOptions, SkySnapshot
from .renderer.projection import DomeProjection
from .sky.seeded import seed_for
from .sky.stars import is_night_hour
from .view import SkyView

DEFAULT_LOCATION = Location(latitude=40.7128, longitude=-74.006, name="New York, USA")


def parse_args():
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render an approximate sky dome of stars and constellations."
    )
    parser.add_argument(
        "--time",
        type=str,
        default=None,
        help="ISO-8601 observation time, e.g. 2024-06-21T22:00:00Z (default: now)",
    )
    parser.add_argument(
        "--preset",
        type=str,
        choices=["now", *TIME_PRESETS.keys()],
        default=None,
        help="Move the observation time to a preset time of day",
    )
    parser.add_argument(
        "--city",
        type=str,
        default=None,
        help="City name from the built-in list (default: New York, USA)",
    )
    parser.add_argument("--lat", type=float, default=None, help="Observer latitude")
    parser.add_argument("--lon", type=float, default=None, help="Observer longitude")
    parser.add_argument(
        "--name",
        type=str,
        default=None,
        help="Display name for --lat/--lon (default: the coordinates)",
    )
    parser.add_argument(
        "--search",
        type=str,
        default=None,
        help="List cities matching this text and exit",
    )
    parser.add_argument(
        "--width", type=int, default=800, help="Image width in pixels (default 800)"
    )
    parser.add_argument(
        "--height", type=int, default=800, help="Image height in pixels (default 800)"
    )
    parser.add_argument(
        "--zoom", type=float, default=1.0, help="Zoom factor (default 1.0)"
    )
    parser.add_argument(
        "--theme",
        type=str,
        choices=["light", "dark"],
        default="dark",
        help="Color scheme (default: dark)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output PNG file path (default: output/YYYYMMDD-HHMMSS-location.png)",
    )
    parser.add_argument(
        "--caption",
        action="store_true",
        help="Print caption to stdout",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print detailed internal state during rendering",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args()


def resolve_location(
    city: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    name: Optional[str] = None,
) -> Location:
    """Pick the observer location from CLI inputs.

    Args:
        city: City name from the built-in table
        latitude: Manual latitude (needs longitude too)
        longitude: Manual longitude (needs latitude too)
        name: Display name for manual coordinates

    Returns:
        Validated Location (DEFAULT_LOCATION when nothing is given)

    Raises:
        CityNotFoundError: If the city cannot be resolved
        CoordinateError: If coordinates are incomplete or out of range
    """
    if city:
        return find_city(city)

    if latitude is None and longitude is None:
        return DEFAULT_LOCATION

    if latitude is None:
        raise CoordinateError("latitude", None, "required together with --lon")
    if longitude is None:
        raise CoordinateError("longitude", None, "required together with --lat")

    return make_location(latitude, longitude, name)


def resolve_time(time: Optional[str] = None, preset: Optional[str] = None) -> datetime:
    """Pick the observation time from CLI inputs.

    Raises:
        TimeParseError: If time or preset is invalid
    """
    if time:
        observation_time = parse_timestamp(time)
    else:
        observation_time = datetime.now(timezone.utc).replace(microsecond=0)

    if preset:
        observation_time = apply_time_preset(observation_time, preset)
    return observation_time


def default_output_path(location: Location) -> str:
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    slug = re.sub(r"[^a-z0-9]+", "-", location.name.lower()).strip("-") or "sky"
    return f"output/{timestamp}-{slug}.png"


def search_command(query: str) -> int:
    """Print cities matching a query.

    Returns:
        Exit code (0 if anything matched, 1 otherwise)
    """
    matches = search_cities(query)
    if not matches:
        print(f"No cities match '{query}'", file=sys.stderr)
        return 1

    for city in matches:
        print(f"{city.name}  ({format_coordinates(city.latitude, city.longitude)})")
    return 0


def print_verbose_info(snapshot: SkySnapshot, options: RenderOptions) -> None:
    """Print detailed internal state information for verbose output.

    Args:
        snapshot: Generated sky snapshot
        options: Render options
    """
    print("=== VERBOSE: Internal State ===")
    print()

    location = snapshot.location
    print("Observer:")
    print(f"  Location: {location.name}")
    print(f"  Latitude: {location.latitude:.6f}°")
    print(f"  Longitude: {location.longitude:.6f}°")
    print(f"  Time: {snapshot.time.isoformat()}")
    print(f"  Seed: {seed_for(snapshot.time, location)!r}")
    print(f"  Night: {is_night_hour(snapshot.time.hour)}")
    print()

    visible = snapshot.visible_stars()
    print("Sky Model:")
    print(f"  Stars: {len(snapshot.stars)}")
    print(f"  Visible stars: {len(visible)}")
    for constellation in snapshot.constellations:
        center = constellation.center
        print(
            f"  {constellation.name}: {len(constellation.lines)} lines, "
            f"center alt {center.altitude:.2f}° az {center.azimuth:.2f}°"
        )
    print()

    projection = DomeProjection(options.width, options.height, options.zoom)
    print("Viewport:")
    print(f"  Size: {options.width} x {options.height}")
    print(f"  Zoom: {options.zoom}")
    print(f"  Color scheme: {options.color_scheme}")
    print(f"  Dome radius: {projection.dome_radius:.1f} px")
    print("=== END VERBOSE ===")
    print()


def render_sky_view(
    time: Optional[str] = None,
    preset: Optional[str] = None,
    city: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    name: Optional[str] = None,
    width: int = 800,
    height: int = 800,
    zoom: float = 1.0,
    theme: str = "dark",
    output_path: Optional[str] = None,
    print_caption: bool = False,
    verbose: bool = False,
) -> int:
    """Render a sky dome and save to PNG with embedded metadata.

    Args:
        time: ISO-8601 observation time (None for now)
        preset: Optional time-of-day preset applied to the time
        city: City name from the built-in table
        latitude: Manual latitude
        longitude: Manual longitude
        name: Display name for manual coordinates
        width: Image width in pixels
        height: Image height in pixels
        zoom: Zoom factor
        theme: "light" or "dark"
        output_path: Path to save output PNG (None for auto-generated)
        print_caption: If True, print caption to stdout
        verbose: If True, print detailed internal state

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        observation_time = resolve_time(time, preset)
    except SkyDomeError as e:
        return handle_error(e, "parsing observation time")

    try:
        location = resolve_location(city, latitude, longitude, name)
    except SkyDomeError as e:
        return handle_error(e, "resolving observer location")

    try:
        options = RenderOptions(
            width=width, height=height, zoom=zoom, color_scheme=theme
        )
        view = SkyView(observation_time, location, options)
        snapshot = view.snapshot

        if verbose:
            print_verbose_info(snapshot, options)

        print(f"Rendering sky over {location.name}")
        print(f"  Time: {format_time(observation_time)}")
        print(f"  Location: {format_coordinates(location.latitude, location.longitude)}")
        print()

        image_array = view.frame()

        if output_path is None:
            output_path = default_output_path(location)

        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        embed_metadata(image_array, snapshot, options, str(output_file))
        print(f"Saved to: {output_file}")

        if print_caption:
            print(generate_caption(snapshot))

        return 0

    except Exception as e:
        return handle_error(e, "rendering sky view")


def main():
    """CLI entry point."""
    args = parse_args()

    if args.search is not None:
        sys.exit(search_command(args.search))

    exit_code = render_sky_view(
        time=args.time,
        preset=args.preset,
        city=args.city,
        latitude=args.lat,
        longitude=args.lon,
        name=args.name,
        width=args.width,
        height=args.height,
        zoom=args.zoom,
        theme=args.theme,
        output_path=args.output,
        print_caption=args.caption,
        verbose=args.verbose,
    )

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
