from __future__ import annotations

import logging
import re
from typing import BinaryIO, List, Optional, Sequence, TextIO, Union

from PIL import Image

from ..errors import XpmArgumentError, XpmFormatError, XpmKeyNotFoundError, XpmRangeError, XpmUnsupportedError
from ..model import ColorEntry, Document
from ..modes import ColorMode
from ..raster import Raster

logger = logging.getLogger(__name__)

Source = Union[bytes, bytearray, str, Sequence[str], BinaryIO, TextIO]

_LINE_BREAK_RE = re.compile(r"[\r\n]+")


def split_lines(text: Optional[str]) -> List[str]:
    """Split XPM text on any mix of CR and LF, dropping empty fragments."""
    if text is None or not text.strip():
        raise XpmRangeError("Parameter 'source' must not be null, empty or white space.")
    return [line for line in _LINE_BREAK_RE.split(text) if line]


def read_lines(source: Source) -> List[str]:
    """Normalize bytes, file objects, text or a line sequence into a list of lines."""
    if source is None:
        raise XpmArgumentError("Parameter 'source' must not be null.")
    if hasattr(source, "read"):
        source = source.read()
    if isinstance(source, (bytes, bytearray)):
        try:
            source = bytes(source).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise XpmFormatError(f"Source is not valid UTF-8 text: {exc}") from exc
    if isinstance(source, str):
        return split_lines(source)
    return list(source)


def resolve_color(entry: ColorEntry, mode: Union[ColorMode, int]) -> int:
    """Pick the variant of ``entry`` requested by ``mode`` (colored, then grayscale, then monochrome)."""
    requested = ColorMode.resolve(mode)
    if requested & ColorMode.COLORED and entry.coloration is not None:
        return entry.coloration
    if requested & ColorMode.GRAYSCALE and entry.grayscaled is not None:
        return entry.grayscaled
    if requested & ColorMode.MONOCHROME and entry.monochrome is not None:
        return entry.monochrome
    raise XpmUnsupportedError(f"Color for type '{int(mode)}' is not supported.")


def render_document(document: Document, mode: Union[ColorMode, int] = ColorMode.DEFAULT) -> Raster:
    header = document.header
    width, height = header.width, header.height
    logger.debug("Rendering %dx%d XPM with mode %s", width, height, int(mode))
    pixels: List[int] = []
    for y in range(height):
        for x in range(width):
            key = document.pixels[x, y]
            entry = document.colors.get(key)
            if entry is None:
                raise XpmKeyNotFoundError(f"Color key '{key}' not found.")
            pixels.append(resolve_color(entry, mode))
    return Raster(pixels, width)


def decode_raster(source: Source, mode: Union[ColorMode, int] = ColorMode.DEFAULT) -> Raster:
    return render_document(Document.parse(read_lines(source)), mode)


def decode(source: Source, mode: Union[ColorMode, int] = ColorMode.DEFAULT) -> Image.Image:
    """Decode XPM text (bytes, file object, string or lines) into an RGBA image."""
    return decode_raster(source, mode).to_image()
