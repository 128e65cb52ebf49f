"""Render pixel grids as terminal art."""

from climg.render.size import parse_size
from climg.render.terminal import TerminalRenderer, render_image

__all__ = ["parse_size", "TerminalRenderer", "render_image"]
