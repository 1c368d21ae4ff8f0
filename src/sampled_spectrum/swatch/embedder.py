"""PNG colour swatch output with embedded spectrum metadata."""

from typing import Dict, Optional

import numpy as np
from PIL import Image, PngImagePlugin

from ..models.swatch import Swatch


def write_swatch(
    swatch: Swatch, output_path: str, size: tuple[int, int] = (128, 128)
) -> None:
    """Save a solid-colour 8-bit PNG with the swatch description embedded.

    Args:
        swatch: Swatch colour and metadata
        output_path: Path where to save the PNG file
        size: Image (width, height) in pixels
    """
    width, height = size
    if width <= 0 or height <= 0:
        raise ValueError("Swatch size must be positive")

    color = np.asarray(swatch.srgb_8bit)
    if color.shape != (3,):
        raise ValueError("Swatch colour must have exactly three channels")
    if np.any(color < 0) or np.any(color > 255):
        raise ValueError("Swatch colour channels must be in [0, 255]")

    png_info = PngImagePlugin.PngInfo()

    metadata_dict = _swatch_to_metadata_dict(swatch)
    for key, value in metadata_dict.items():
        png_info.add_text(key, str(value))

    image_array = np.empty((height, width, 3), dtype=np.uint8)
    image_array[:, :] = color.astype(np.uint8)
    image = Image.fromarray(image_array)

    image.save(output_path, "PNG", pnginfo=png_info)


def _format_triple(values) -> str:
    return ", ".join(f"{float(v):.6g}" for v in values)


def _swatch_to_metadata_dict(swatch: Swatch) -> Dict[str, str]:
    """Convert Swatch dataclass to metadata dictionary.

    Args:
        swatch: Swatch description

    Returns:
        Dictionary with string values for PNG text chunks
    """
    return {
        "source": swatch.source,
        "xyz": _format_triple(swatch.xyz),
        "rgb_linear": _format_triple(swatch.rgb_linear),
        "srgb_8bit": ", ".join(str(int(v)) for v in swatch.srgb_8bit),
        "generator_id": swatch.generator_id,
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
            metadata[key] = value

    return metadata if metadata else None
