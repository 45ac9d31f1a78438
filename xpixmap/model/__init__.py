from .colors import TRANSPARENT, ColorEntry, ColorTable, format_argb, parse_color
from .constants import XPM_EXT_END, XPM_EXT_TAG
from .document import Document
from .extensions import Extensions
from .header import Header
from .named_colors import NamedColorRegistry, normalize_color_name
from .pixels import PixelGrid

__all__ = [
    "ColorEntry",
    "ColorTable",
    "Document",
    "Extensions",
    "format_argb",
    "Header",
    "NamedColorRegistry",
    "normalize_color_name",
    "parse_color",
    "PixelGrid",
    "TRANSPARENT",
    "XPM_EXT_END",
    "XPM_EXT_TAG",
]
