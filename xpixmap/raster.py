from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from PIL import Image


def argb_to_rgba(argb: int) -> Tuple[int, int, int, int]:
    return ((argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF, (argb >> 24) & 0xFF)


def rgba_to_argb(rgba: Tuple[int, int, int, int]) -> int:
    r, g, b, a = rgba
    return (a << 24) | (r << 16) | (g << 8) | b


@dataclass(frozen=True)
class Raster:
    """Row-major ARGB pixel buffer produced by the decoder and read by the encoder."""

    pixels: List[int]
    width: int

    def validate(self) -> None:
        """Validate dimensions before the buffer is handed to Pillow."""
        if self.width <= 0:
            raise ValueError("Width must be greater than zero")
        if len(self.pixels) % self.width != 0:
            raise ValueError("Pixels length must be a multiple of width")

    @property
    def height(self) -> int:
        """Return raster height computed from width and pixel count."""
        self.validate()
        return len(self.pixels) // self.width

    def get(self, x: int, y: int) -> int:
        return self.pixels[y * self.width + x]

    def to_image(self) -> Image.Image:
        img = Image.new("RGBA", (self.width, self.height))
        img.putdata([argb_to_rgba(p) for p in self.pixels])
        return img

    @classmethod
    def from_image(cls, img: Image.Image) -> "Raster":
        if img.mode != "RGBA":
            img = img.convert("RGBA")
        data = img.tobytes("raw", "RGBA")
        pixels = [rgba_to_argb(tuple(data[i : i + 4])) for i in range(0, len(data), 4)]
        return cls(pixels, img.width)
