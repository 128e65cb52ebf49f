"""Color representation and quantization for terminal output."""

import math
from dataclasses import dataclass
from enum import Enum

from climg.core.pixel import Pixel


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    EXTENDED_256 = "256"    # Extended 256-color (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """
    Convert RGB to the nearest xterm 256-color palette index.

    Grays use the 24-step ramp (232-255), with the extremes snapped to the
    cube's black (16) and white (231). Everything else lands in the
    6x6x6 color cube (16-231).
    """
    if r == g == b:
        if r < 8:
            return 16
        if r > 248:
            return 231
        return 232 + _round_half_up(r * 23 / 255)

    return (
        16
        + _round_half_up(r / 255 * 5) * 36
        + _round_half_up(g / 255 * 5) * 6
        + _round_half_up(b / 255 * 5)
    )


@dataclass(frozen=True)
class Color:
    """
    Represents a color value for terminal output.

    Supports 256-color and true color modes.
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.EXTENDED_256, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    @classmethod
    def from_pixel(cls, pixel: Pixel, mode: ColorMode = ColorMode.TRUE_COLOR) -> "Color":
        """Create a Color for a pixel, quantizing when mode is 256-color."""
        r, g, b = pixel.clamped().rgb
        if mode == ColorMode.EXTENDED_256:
            return cls.from_256(rgb_to_ansi256(r, g, b))
        return cls.from_rgb(r, g, b)

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color."""
        if self.mode == ColorMode.EXTENDED_256:
            return f"38;5;{self.value}"
        assert isinstance(self.value, tuple)
        r, g, b = self.value
        return f"38;2;{r};{g};{b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for background color."""
        if self.mode == ColorMode.EXTENDED_256:
            return f"48;5;{self.value}"
        assert isinstance(self.value, tuple)
        r, g, b = self.value
        return f"48;2;{r};{g};{b}"
