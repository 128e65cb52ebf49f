"""Render options and the environment variables the CLI reads them from."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

# A pixel count, a percentage string such as "50%", or None for the default
SizeSpec = int | float | str | None

# Environment fallbacks for the command-line options
ENV_WIDTH = "CLIMG_WIDTH"
ENV_HEIGHT = "CLIMG_HEIGHT"
ENV_NO_TRUE_COLOR = "CLIMG_NO_TRUECOLOR"
ENV_SHOW_INFO = "CLIMG_INFO"
ENV_LOG_LEVEL = "CLIMG_LOG_LEVEL"


@dataclass(frozen=True)
class RenderOptions:
    """
    Options for rendering an image to the terminal.

    Attributes:
        width: Width in pixels or percentage of the terminal width
            (default: terminal width)
        height: Height in character rows or percentage of the terminal
            height (default: terminal height)
        true_color: Use 24-bit RGB escapes instead of the 256-color palette
        show_info: Prefix the output with terminal and image dimensions
    """
    width: SizeSpec = None
    height: SizeSpec = None
    true_color: bool = True
    show_info: bool = False

    def replace(self, **changes: object) -> RenderOptions:
        return dataclasses.replace(self, **changes)
