"""Shared fixtures: small pixel grids, generated image files, a fixed terminal."""

import struct
import zlib
from pathlib import Path

import pytest
from PIL import Image

from climg.core.pixel import Pixel, PixelGrid
from climg.terminal import TerminalBounds

BLACK = Pixel(0, 0, 0)
WHITE = Pixel(255, 255, 255)
RED = Pixel(255, 0, 0)
GREEN = Pixel(0, 255, 0)
BLUE = Pixel(0, 0, 255)
CLEAR = Pixel.transparent()


@pytest.fixture
def checkerboard() -> PixelGrid:
    """2x2 opaque black/white checkerboard."""
    return [[BLACK, WHITE], [WHITE, BLACK]]


@pytest.fixture
def gradient() -> PixelGrid:
    """3x3 grid with distinct, predictable pixels."""
    return [
        [Pixel(x * 100, y * 100, 50) for x in range(3)]
        for y in range(3)
    ]


@pytest.fixture
def opaque_grid():
    """Factory for solid opaque grids of a given size."""
    def make(width: int, height: int, pixel: Pixel = RED) -> PixelGrid:
        return [[pixel] * width for _ in range(height)]
    return make


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """A 4x4 RGBA PNG with a transparent bottom-right corner."""
    img = Image.new("RGBA", (4, 4), (255, 0, 0, 255))
    img.putpixel((3, 3), (0, 0, 0, 0))
    path = tmp_path / "sample.png"
    img.save(path)
    return path


@pytest.fixture
def jpeg_file(tmp_path: Path) -> Path:
    """A 6x4 RGB JPEG."""
    img = Image.new("RGB", (6, 4), (0, 0, 255))
    path = tmp_path / "sample.jpg"
    img.save(path, quality=95)
    return path


@pytest.fixture
def fixed_terminal(monkeypatch: pytest.MonkeyPatch) -> TerminalBounds:
    """Pin the terminal size seen by the renderer to 20x10 cells."""
    bounds = TerminalBounds(width=20, height=10)
    monkeypatch.setattr("climg.render.terminal.get_terminal_size", lambda: bounds)
    return bounds


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(kind + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)


@pytest.fixture
def ztxt_bomb_png(tmp_path: Path) -> Path:
    """A valid 2x2 PNG carrying a zTXt chunk that inflates past Pillow's text limit."""
    source = tmp_path / "plain.png"
    Image.new("RGB", (2, 2), (255, 0, 0)).save(source)
    data = source.read_bytes()

    # Signature (8 bytes) + IHDR chunk (25 bytes)
    head, rest = data[:33], data[33:]
    payload = b"Comment\x00\x00" + zlib.compress(b"\x00" * (20 * 1024 * 1024), 9)
    path = tmp_path / "bomb.png"
    path.write_bytes(head + _png_chunk(b"zTXt", payload) + rest)
    return path
