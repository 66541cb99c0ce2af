"""RGB framebuffer image with raw and BMP input and output."""

from __future__ import annotations

from os import PathLike
from typing import Union

import numpy as np
from PIL import Image as _PILImage

CHANNELS = 3

_Path = Union[str, "PathLike[str]"]


class Image:
    """A mutable RGB image of 8-bit channels addressed as (x, y) from the top left."""

    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.pixels = np.zeros((self.height, self.width, CHANNELS), dtype=np.uint8)

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"

    def _check_position(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image"
            )

    def get_pixel(self, x, y):
        """Return the (r, g, b) channels of the pixel at (x, y)."""
        self._check_position(x, y)
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    def set_pixel(self, x, y, r, g, b):
        """Set the pixel at (x, y) from integer channels in 0..255."""
        self._check_position(x, y)
        for channel in (r, g, b):
            if not 0 <= channel <= 255:
                raise ValueError(f"channel value {channel} is outside 0..255")
        self.pixels[y, x] = (r, g, b)

    def set_pixel_float(self, x, y, r, g, b):
        """Set the pixel at (x, y) from float channels, clamped to 0..1."""
        channels = (int(min(max(float(c), 0.0), 1.0) * 255) for c in (r, g, b))
        self.set_pixel(x, y, *channels)

    def clear(self, color):
        """Fill the whole image with one (r, g, b) colour."""
        r, g, b = color
        for channel in (r, g, b):
            if not 0 <= channel <= 255:
                raise ValueError(f"channel value {channel} is outside 0..255")
        self.pixels[...] = (r, g, b)

    def to_bytes(self):
        """Return the pixels as row-major packed RGB bytes."""
        return self.pixels.tobytes()

    @classmethod
    def from_raw(cls, data, width, height):
        """Build an image from packed row-major RGB bytes."""
        image = cls(width, height)
        size = image.width * image.height * CHANNELS
        if len(data) < size:
            raise ValueError(f"raw data holds {len(data)} bytes, {size} are needed")
        image.pixels[...] = np.frombuffer(bytes(data), dtype=np.uint8, count=size).reshape(
            image.height, image.width, CHANNELS
        )
        return image

    def save_raw(self, path):
        """Write the image as packed RGB bytes."""
        with open(path, "wb") as stream:
            stream.write(self.to_bytes())

    @classmethod
    def load_raw(cls, path, width, height):
        """Read an image of the given size from a packed RGB file."""
        with open(path, "rb") as stream:
            data = stream.read(width * height * CHANNELS)
        return cls.from_raw(data, width, height)

    def save_bmp(self, path):
        """Write the image as a 24-bit BMP file."""
        _PILImage.fromarray(self.pixels, "RGB").save(path, format="BMP")

    @classmethod
    def load_bmp(cls, path):
        """Read a BMP file into a new image."""
        with _PILImage.open(path) as source:
            array = np.asarray(source.convert("RGB"), dtype=np.uint8)
        height, width = array.shape[:2]
        image = cls(width, height)
        image.pixels[...] = array
        return image