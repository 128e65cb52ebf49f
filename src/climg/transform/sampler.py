"""Sample pixel grids at fractional coordinates."""

import math

from climg.core.pixel import Pixel, PixelGrid


def _blend(p11: int, p12: int, p21: int, p22: int, dx: float, dy: float) -> int:
    value = (
        p11 * (1 - dx) * (1 - dy)
        + p12 * dx * (1 - dy)
        + p21 * (1 - dx) * dy
        + p22 * dx * dy
    )
    return max(0, min(255, math.floor(value + 0.5)))


def bilinear_sample(grid: PixelGrid, x: float, y: float) -> Pixel:
    """
    Sample a pixel using bilinear interpolation.

    Blends the four pixels surrounding (x, y), weighted by distance. Alpha is
    blended like any other channel so transparent edges fade rather than
    snapping. Coordinates must lie inside the grid; they are not validated.

    Args:
        grid: Source pixel rows
        x: Column coordinate, 0 <= x <= width - 1
        y: Row coordinate, 0 <= y <= height - 1

    Returns:
        Interpolated pixel, channels rounded and clamped to 0-255
    """
    width = len(grid[0])
    height = len(grid)

    x1 = math.floor(x)
    y1 = math.floor(y)
    x2 = min(x1 + 1, width - 1)
    y2 = min(y1 + 1, height - 1)
    dx = x - x1
    dy = y - y1

    p11 = grid[y1][x1]
    p12 = grid[y1][x2]
    p21 = grid[y2][x1]
    p22 = grid[y2][x2]

    return Pixel(
        r=_blend(p11.r, p12.r, p21.r, p22.r, dx, dy),
        g=_blend(p11.g, p12.g, p21.g, p22.g, dx, dy),
        b=_blend(p11.b, p12.b, p21.b, p22.b, dx, dy),
        a=_blend(p11.a, p12.a, p21.a, p22.a, dx, dy),
    )
