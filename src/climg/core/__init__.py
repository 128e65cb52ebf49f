"""Core data structures for terminal image rendering."""

from climg.core.pixel import ImageData, Pixel, PixelGrid, grid_size
from climg.core.color import Color, ColorMode, rgb_to_ansi256
from climg.core.errors import ClimgError, DecodeFailure, InvalidSize, UnsupportedFormat

__all__ = [
    "Pixel",
    "PixelGrid",
    "ImageData",
    "grid_size",
    "Color",
    "ColorMode",
    "rgb_to_ansi256",
    "ClimgError",
    "DecodeFailure",
    "InvalidSize",
    "UnsupportedFormat",
]
