from .errors import (
    XpmArgumentError,
    XpmError,
    XpmFormatError,
    XpmKeyNotFoundError,
    XpmRangeError,
    XpmUnsupportedError,
)
from .model import ColorEntry, ColorTable, Document, Extensions, Header, PixelGrid
from .modes import ColorMode
from .raster import Raster
from .rendering import build, build_document, decode, decode_raster, encode

__version__ = "0.1.0"

__all__ = [
    "build",
    "build_document",
    "ColorEntry",
    "ColorMode",
    "ColorTable",
    "decode",
    "decode_raster",
    "Document",
    "encode",
    "Extensions",
    "Header",
    "PixelGrid",
    "Raster",
    "XpmArgumentError",
    "XpmError",
    "XpmFormatError",
    "XpmKeyNotFoundError",
    "XpmRangeError",
    "XpmUnsupportedError",
]
