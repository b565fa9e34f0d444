"""Pixel buffers: the frame being drawn and the textures drawn from."""

from __future__ import annotations

import os
import sys
from array import array
from dataclasses import dataclass
from typing import Sequence, Union

from PIL import Image

from .reader import CubError

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
TEXTURE_WIDTH = 64
TEXTURE_HEIGHT = 64

_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class Texture:
    """An immutable image of 0xRRGGBB colours stored row by row."""

    width: int
    height: int
    pixels: Sequence[int]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture dimensions must be positive")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match texture dimensions")

    def color_at(self, x: int, y: int) -> int:
        """Return the colour of the texel in column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texel ({x}, {y}) outside {self.width}x{self.height} texture")
        return self.pixels[y * self.width + x]


class Frame:
    """A mutable 32-bit image that a scene is rendered into."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = array("I", [0]) * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} frame")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column ``x``, row ``y``."""
        self.pixels[self._index(x, y)] = color & _MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x``, row ``y``."""
        return self.pixels[self._index(x, y)]

    def fill(self, color: int) -> None:
        """Paint every pixel with one colour."""
        self.pixels = array("I", [color & _MASK]) * (self.width * self.height)

    def fill_halves(self, ceiling: int, floor: int) -> None:
        """Paint the upper half with ``ceiling`` and the rest with ``floor``."""
        top = (self.height // 2) * self.width
        bottom = self.width * self.height - top
        self.pixels = array("I", [ceiling & _MASK]) * top + array("I", [floor & _MASK]) * bottom

    def to_bytes(self) -> bytes:
        """Return the pixels as little-endian 32-bit words (BGRA byte order)."""
        data = array("I", self.pixels)
        if sys.byteorder == "big":
            data.byteswap()
        return data.tobytes()


def load_texture(path: Union[str, "os.PathLike[str]"]) -> Texture:
    """Load an image file (XPM or any format the imaging library reads) as a Texture."""
    try:
        with Image.open(path) as image:
            rgb = image.convert("RGB")
    except (OSError, ValueError, SyntaxError) as exc:
        raise CubError("Error! loading texture") from exc
    raw = rgb.tobytes()
    pixels = tuple(
        (raw[i] << 16) | (raw[i + 1] << 8) | raw[i + 2]
        for i in range(0, len(raw), 3)
    )
    return Texture(rgb.width, rgb.height, pixels)