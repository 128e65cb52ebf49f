"""
climg: display images in the terminal

Renders PNG and JPEG images as colored half-block characters, two pixels
per character cell, in true color or the 256-color palette.

Quick Start:
    >>> import climg
    >>> image = climg.load_image("photo.png")
    >>> print(climg.render_image(image.pixels, climg.RenderOptions(width="50%")))

Features:
    - Fit-to-terminal resizing that preserves aspect ratio
    - Bilinear interpolation for large downscales and upscales
    - Transparency-aware compositing (alpha shows the terminal background)
    - 24-bit true color or 256-color output
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

__version__ = "0.1.0"

# Core types
from climg.core.pixel import ImageData, Pixel, PixelGrid
from climg.core.color import Color, ColorMode, rgb_to_ansi256
from climg.core.errors import ClimgError, DecodeFailure, InvalidSize, UnsupportedFormat

# Configuration
from climg.config import RenderOptions
from climg.terminal import TerminalBounds, get_terminal_size

# Pipeline
from climg.io.reader import load_image
from climg.transform.sampler import bilinear_sample
from climg.transform.resize import resize_image
from climg.render.size import parse_size
from climg.render.terminal import TerminalRenderer, render_image


def show(
    path: str | Path,
    options: RenderOptions | None = None,
    *,
    file: TextIO | None = None,
) -> None:
    """Load an image and write it, rendered, to file (default: stdout)."""
    image = load_image(path)
    output = render_image(image.pixels, options)
    out = file if file is not None else sys.stdout
    out.write(output + "\n")
    out.flush()


__all__ = [
    # Version
    "__version__",
    # Core types
    "Pixel",
    "PixelGrid",
    "ImageData",
    "Color",
    "ColorMode",
    # Errors
    "ClimgError",
    "DecodeFailure",
    "InvalidSize",
    "UnsupportedFormat",
    # Configuration
    "RenderOptions",
    "TerminalBounds",
    "get_terminal_size",
    # Pipeline
    "load_image",
    "bilinear_sample",
    "resize_image",
    "parse_size",
    "rgb_to_ansi256",
    "TerminalRenderer",
    "render_image",
    "show",
]
