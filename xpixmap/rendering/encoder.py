from __future__ import annotations

import logging
from typing import Dict, List, Optional, Union

from PIL import Image

from ..errors import XpmRangeError
from ..model import Document, format_argb
from ..modes import ColorMode
from ..raster import Raster
from .keys import color_keys, key_length

logger = logging.getLogger(__name__)

WHITE = 0xFFFFFFFF
BLACK = 0xFF000000

MONOCHROME_THRESHOLD = 127 * 3


def to_grayscale(argb: int) -> int:
    """Convert to gray using Rec. 709 luma, keeping alpha."""
    a = (argb >> 24) & 0xFF
    r = (argb >> 16) & 0xFF
    g = (argb >> 8) & 0xFF
    b = argb & 0xFF
    luminance = int(0.2126 * r + 0.7152 * g + 0.0722 * b)
    return (a << 24) | (luminance << 16) | (luminance << 8) | luminance


def to_monochrome(argb: int) -> int:
    """Map to black or white; anything not fully opaque becomes white."""
    if (argb >> 24) & 0xFF < 0xFF:
        return WHITE
    r = (argb >> 16) & 0xFF
    g = (argb >> 8) & 0xFF
    b = argb & 0xFF
    if r + g + b <= MONOCHROME_THRESHOLD:
        return BLACK
    return WHITE


def _as_raster(image: Union[Image.Image, Raster]) -> Raster:
    if isinstance(image, Raster):
        return image
    return Raster.from_image(image)


def assign_keys(raster: Raster) -> Dict[int, str]:
    """Map every distinct color to a key, in the order colors are first seen."""
    colors: Dict[int, None] = dict.fromkeys(raster.pixels)
    keys = color_keys(len(colors))
    if len(keys) != len(colors):
        raise RuntimeError("The calculated number of colors does not match the number of color keys.")
    return dict(zip(colors, keys))


def _color_line(key: str, argb: int, mode: ColorMode) -> str:
    parts = [key]
    if mode & ColorMode.COLORED:
        parts.append(f"c {format_argb(argb)}")
    if mode & ColorMode.GRAYSCALE:
        parts.append(f"g {format_argb(to_grayscale(argb))}")
    if mode & ColorMode.MONOCHROME:
        parts.append(f"m {format_argb(to_monochrome(argb))}")
    return " ".join(parts)


def build(image: Optional[Union[Image.Image, Raster]], mode: Union[ColorMode, int] = ColorMode.DEFAULT) -> List[str]:
    """Build XPM lines (header, colors, pixel rows) for an image."""
    if image is None:
        return []
    requested = ColorMode.resolve(mode)
    raster = _as_raster(image)
    if raster.width < 1 or not raster.pixels:
        raise XpmRangeError("Image must contain at least one pixel.")
    width, height = raster.width, raster.height
    assignments = assign_keys(raster)
    logger.debug(
        "Encoding %dx%d image with %d colors, key length %d",
        width,
        height,
        len(assignments),
        key_length(len(assignments)),
    )

    lines = [f"{width} {height} {len(assignments)} {key_length(len(assignments))}"]
    lines.extend(_color_line(key, argb, requested) for argb, key in assignments.items())
    for y in range(height):
        row = raster.pixels[y * width : (y + 1) * width]
        lines.append("".join(assignments[argb] for argb in row))
    return lines


def build_document(
    image: Optional[Union[Image.Image, Raster]], mode: Union[ColorMode, int] = ColorMode.DEFAULT
) -> Optional[Document]:
    lines = build(image, mode)
    if not lines:
        return None
    return Document.parse(lines)


def encode(image: Optional[Union[Image.Image, Raster]], mode: Union[ColorMode, int] = ColorMode.DEFAULT) -> str:
    """Encode an image as XPM text, one line per header/color/pixel row."""
    return "\n".join(build(image, mode))
