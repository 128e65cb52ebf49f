"""Render pixel grids to terminal-compatible escape sequences."""

from __future__ import annotations

import logging
from typing import Callable

from climg.config import RenderOptions
from climg.core.color import Color, ColorMode
from climg.core.constants import (
    BOLD,
    CSI,
    DEFAULT_BG,
    DEFAULT_FG,
    EMPTY_CELL,
    LOWER_HALF,
    RESET,
    UPPER_HALF,
)
from climg.core.pixel import Pixel, PixelGrid, grid_size
from climg.render.size import parse_size
from climg.terminal import TerminalBounds, get_terminal_size
from climg.transform.resize import resize_image

logger = logging.getLogger(__name__)


class TerminalRenderer:
    """
    Render a pixel grid as half-block ANSI art sized to the terminal.

    Each character cell carries two vertically stacked pixels: the top one
    as the foreground of ▀ and the bottom one as its background. Pixels with
    alpha at or below the opacity threshold are not painted, so the
    terminal's own background shows through.
    """

    def __init__(
        self,
        options: RenderOptions | None = None,
        size_provider: Callable[[], TerminalBounds] | None = None,
    ):
        self.options = options or RenderOptions()
        self.size_provider = size_provider

    @property
    def color_mode(self) -> ColorMode:
        return ColorMode.TRUE_COLOR if self.options.true_color else ColorMode.EXTENDED_256

    def target_size(self, bounds: TerminalBounds) -> tuple[int, int]:
        """Resolve the requested width/height in cells, clamped to bounds."""
        width = min(parse_size(self.options.width, bounds.width), bounds.width)
        height = min(parse_size(self.options.height, bounds.height), bounds.height)
        return width, height

    def render(self, grid: PixelGrid, bounds: TerminalBounds | None = None) -> str:
        """Render grid to an ANSI string (no trailing newline)."""
        original_width, original_height = grid_size(grid)
        if bounds is None:
            bounds = (self.size_provider or get_terminal_size)()

        width, height = self.target_size(bounds)
        # Two pixel rows per character row
        resized = resize_image(grid, width, height * 2)
        logger.debug(
            "Rendering %dx%d image into %dx%d cells (terminal %dx%d)",
            original_width, original_height, width, height, bounds.width, bounds.height,
        )

        lines = self._render_rows(resized)

        if self.options.show_info:
            pixel_width, pixel_height = grid_size(resized)
            header = [
                f"{BOLD}Terminal:{RESET} {bounds.width}x{bounds.height} characters",
                f"{BOLD}Render size:{RESET} {pixel_width}x{len(lines)} characters",
                f"{BOLD}Render size:{RESET} {pixel_width}x{pixel_height} pixels",
                f"{BOLD}Original size:{RESET} {original_width}x{original_height} pixels",
                "",
            ]
            lines = header + lines

        return '\n'.join(lines)

    def _render_rows(self, grid: PixelGrid) -> list[str]:
        lines: list[str] = []
        transparent = Pixel.transparent()

        # Process two rows at a time
        for y in range(0, len(grid), 2):
            top_row = grid[y]
            bottom_row = grid[y + 1] if y + 1 < len(grid) else None

            line_parts: list[str] = []
            for x, top in enumerate(top_row):
                # Odd final row: the missing half stays unpainted
                bottom = bottom_row[x] if bottom_row is not None else transparent
                line_parts.append(self._render_cell(top, bottom))

            # Reset at end of line to prevent color bleeding
            line_parts.append(RESET)
            lines.append(''.join(line_parts))

        return lines

    def _render_cell(self, top: Pixel, bottom: Pixel) -> str:
        mode = self.color_mode

        if top.is_opaque and bottom.is_opaque:
            fg = Color.from_pixel(top, mode)
            bg = Color.from_pixel(bottom, mode)
            return f"{CSI}{fg.to_sgr_fg()}m{CSI}{bg.to_sgr_bg()}m{UPPER_HALF}"
        if top.is_opaque:
            fg = Color.from_pixel(top, mode)
            return f"{CSI}{fg.to_sgr_fg()}m{DEFAULT_BG}{UPPER_HALF}"
        if bottom.is_opaque:
            fg = Color.from_pixel(bottom, mode)
            return f"{CSI}{fg.to_sgr_fg()}m{DEFAULT_BG}{LOWER_HALF}"
        return f"{DEFAULT_FG}{DEFAULT_BG}{EMPTY_CELL}"


def render_image(
    grid: PixelGrid,
    options: RenderOptions | None = None,
    *,
    bounds: TerminalBounds | None = None,
) -> str:
    """
    Render image pixels to the terminal using ANSI escape codes.

    Args:
        grid: Pixel rows to render
        options: Rendering options (default: fit the terminal, true color)
        bounds: Terminal size to fit; queried from the terminal when omitted

    Returns:
        ANSI-formatted string ready for terminal output
    """
    return TerminalRenderer(options).render(grid, bounds)
