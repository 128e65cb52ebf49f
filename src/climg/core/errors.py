"""Exceptions raised while loading and rendering images."""

from pathlib import Path


class ClimgError(Exception):
    """Base class for all climg errors."""


class UnsupportedFormat(ClimgError, ValueError):
    """The file extension is not one of the supported image formats."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"Unsupported format: {self.path.name}. Use PNG or JPEG.")


class DecodeFailure(ClimgError, OSError):
    """The image could not be read or the codec rejected its contents."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot load {self.path}: {reason}")


class InvalidSize(ClimgError, ValueError):
    """A width or height was neither a count nor a percentage."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Invalid size {value!r}: expected a pixel count (e.g. 80) or a percentage (e.g. 50%)"
        )
