"""File I/O for images."""

from climg.io.reader import is_supported, load_image

__all__ = ["is_supported", "load_image"]
