"""PNG metadata embedding and extraction for sky-dome renders."""

from typing import Dict, Optional

import numpy as np
from PIL import Image, PngImagePlugin

from .. import __version__
from ..models.options import RenderOptions
from ..models.snapshot import SkySnapshot


def embed_metadata(
    image_array: np.ndarray,
    snapshot: SkySnapshot,
    options: RenderOptions,
    output_path: str,
) -> None:
    """Save an 8-bit PNG image with embedded metadata.

    Args:
        image_array: 8-bit RGB image array with shape (height, width, 3)
        snapshot: Sky snapshot that was rendered
        options: Render options used for the image
        output_path: Path where to save the PNG file
    """
    if image_array.dtype != np.uint8:
        raise ValueError("Image array must be uint8 for 8-bit PNG output")

    if len(image_array.shape) != 3 or image_array.shape[2] != 3:
        raise ValueError("Image array must have shape (height, width, 3)")

    png_info = PngImagePlugin.PngInfo()

    metadata_dict = _snapshot_to_metadata_dict(snapshot, options)
    for key, value in metadata_dict.items():
        png_info.add_itxt(key, value)

    image = Image.fromarray(image_array)
    image.save(output_path, "PNG", pnginfo=png_info)


def _snapshot_to_metadata_dict(
    snapshot: SkySnapshot, options: RenderOptions
) -> Dict[str, str]:
    """Convert a snapshot and its render options to PNG text chunks.

    Args:
        snapshot: Sky snapshot that was rendered
        options: Render options used for the image

    Returns:
        Dictionary with string values for PNG text chunks
    """
    return {
        "location": snapshot.location.name,
        "latitude": str(snapshot.location.latitude),
        "longitude": str(snapshot.location.longitude),
        "time": snapshot.time.isoformat(),
        "stars": str(len(snapshot.stars)),
        "visible_stars": str(len(snapshot.visible_stars())),
        "constellations": ", ".join(c.name for c in snapshot.constellations),
        "zoom": str(options.zoom),
        "color_scheme": options.color_scheme,
        "renderer_id": f"skydome-{__version__}",
    }


def extract_metadata(image_path: str) -> Optional[Dict[str, str]]:
    """Extract metadata from a PNG file.

    Args:
        image_path: Path to PNG file

    Returns:
        Dictionary of metadata key-value pairs, or None if no metadata found
    """
    try:
        image = Image.open(image_path)
    except FileNotFoundError:
        return None

    metadata = {}
    if hasattr(image, "text"):
        for key, value in image.text.items():
            metadata[key] = str(value)

    return metadata if metadata else None
