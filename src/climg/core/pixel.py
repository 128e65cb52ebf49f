from __future__ import annotations

from dataclasses import dataclass

from climg.core.constants import OPACITY_THRESHOLD


def _clamp(value: int) -> int:
    return 0 if value < 0 else 255 if value > 255 else value


@dataclass(frozen=True, slots=True)
class Pixel:
    """A single RGBA pixel. Two of these share one terminal cell."""
    r: int
    g: int
    b: int
    a: int = 255

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def is_opaque(self) -> bool:
        return self.a > OPACITY_THRESHOLD

    @classmethod
    def transparent(cls) -> Pixel:
        return cls(0, 0, 0, 0)

    def clamped(self) -> Pixel:
        """Copy with every channel forced into 0-255."""
        return Pixel(_clamp(self.r), _clamp(self.g), _clamp(self.b), _clamp(self.a))


# Rows top to bottom, every row the same length
PixelGrid = list[list[Pixel]]


@dataclass(frozen=True)
class ImageData:
    """Decoded image: dimensions plus the pixel grid."""
    width: int
    height: int
    pixels: PixelGrid


def grid_size(grid: PixelGrid) -> tuple[int, int]:
    """
    Return (width, height) of a pixel grid.

    Raises:
        ValueError: If the grid is empty or its rows differ in length
    """
    if not grid or not grid[0]:
        raise ValueError("Pixel grid must contain at least one pixel")
    width = len(grid[0])
    for y, row in enumerate(grid):
        if len(row) != width:
            raise ValueError(
                f"Pixel grid is not rectangular: row {y} has {len(row)} pixels, expected {width}"
            )
    return width, len(grid)
