"""Resize pixel grids to fit inside a bounding box."""

from __future__ import annotations

import logging
import math

from climg.core.pixel import PixelGrid, grid_size
from climg.transform.sampler import bilinear_sample

logger = logging.getLogger(__name__)


def fit_size(width: int, height: int, max_width: int, max_height: int) -> tuple[int, int, float]:
    """
    Scale (width, height) uniformly to fit inside (max_width, max_height).

    Aspect ratio is always preserved. Either dimension is at least 1, even
    when a bound is zero or negative.

    Returns:
        (new_width, new_height, scale)
    """
    scale = min(max_width / width, max_height / height)
    new_width = max(1, math.floor(width * scale))
    new_height = max(1, math.floor(height * scale))
    return new_width, new_height, scale


def _should_interpolate(scale: float, width: int, height: int) -> bool:
    # Nearest-neighbor is exact for small adjustments and moderate upscales;
    # blending only pays off when shrinking or blowing up more than 2x.
    return (scale < 1 or scale > 2) and width > 1 and height > 1


def resize_image(
    grid: PixelGrid,
    max_width: int,
    max_height: int,
    use_interpolation: bool = True,
) -> PixelGrid:
    """
    Resize a pixel grid to fit within max_width x max_height.

    Uses bilinear interpolation when downscaling or upscaling beyond 2x
    (if use_interpolation is set and the source is larger than one pixel in
    each direction), and nearest-neighbor otherwise.

    Args:
        grid: Source pixel rows
        max_width: Maximum width in pixels
        max_height: Maximum height in pixels
        use_interpolation: Allow bilinear sampling

    Returns:
        A new grid, at least 1x1

    Raises:
        ValueError: If the source grid is empty or not rectangular
    """
    width, height = grid_size(grid)
    new_width, new_height, scale = fit_size(width, height, max_width, max_height)

    if use_interpolation and _should_interpolate(scale, width, height):
        logger.debug("Bilinear resize %dx%d -> %dx%d (scale %.3f)", width, height, new_width, new_height, scale)
        # Align grid endpoints: first and last destination pixels map onto
        # the first and last source pixels.
        x_span = (new_width - 1) or 1
        y_span = (new_height - 1) or 1
        return [
            [bilinear_sample(grid, x * (width - 1) / x_span, y * (height - 1) / y_span)
             for x in range(new_width)]
            for y in range(new_height)
        ]

    logger.debug("Nearest-neighbor resize %dx%d -> %dx%d (scale %.3f)", width, height, new_width, new_height, scale)
    return [
        [grid[y * height // new_height][x * width // new_width] for x in range(new_width)]
        for y in range(new_height)
    ]
