"""Shared constants for terminal image rendering."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
DEFAULT_FG = f"{CSI}39m"
DEFAULT_BG = f"{CSI}49m"

# Half-block characters: each cell shows two vertically stacked pixels
UPPER_HALF = "▀"  # FG = top pixel, BG = bottom pixel
LOWER_HALF = "▄"  # FG = bottom pixel, BG left unpainted
EMPTY_CELL = " "

# Pixels with alpha above this value are painted, the rest are left to the
# terminal background
OPACITY_THRESHOLD = 128

# Label style for the info header
BOLD = f"{CSI}1m"

SUPPORTED_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg"})
