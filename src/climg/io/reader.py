"""Load PNG and JPEG images into pixel grids."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from climg.core.constants import SUPPORTED_EXTENSIONS
from climg.core.errors import DecodeFailure, UnsupportedFormat
from climg.core.pixel import ImageData, Pixel

logger = logging.getLogger(__name__)


def is_supported(path: str | Path) -> bool:
    """Whether the file extension is one climg can decode."""
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS


def load_image(path: str | Path) -> ImageData:
    """
    Load an image from disk as RGBA pixels.

    Images without an alpha channel (JPEG, RGB PNGs) come back fully
    opaque.

    Raises:
        UnsupportedFormat: If the extension is not .png, .jpg or .jpeg
        DecodeFailure: If the file cannot be read or decoded
    """
    path = Path(path)
    if not is_supported(path):
        raise UnsupportedFormat(path)

    try:
        with Image.open(path) as img:
            source_format = img.format
            rgba = img.convert("RGBA")
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeFailure(path, str(exc)) from exc

    width, height = rgba.size
    px = rgba.load()
    pixels = [
        [Pixel(*px[x, y]) for x in range(width)]
        for y in range(height)
    ]

    logger.debug("Loaded %s (%s, %dx%d)", path, source_format, width, height)
    return ImageData(width=width, height=height, pixels=pixels)
