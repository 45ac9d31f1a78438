from .decoder import decode, decode_raster, read_lines, render_document, resolve_color, split_lines
from .encoder import assign_keys, build, build_document, encode, to_grayscale, to_monochrome
from .keys import KEY_ALPHABET, color_keys, key_length

__all__ = [
    "assign_keys",
    "build",
    "build_document",
    "color_keys",
    "decode",
    "decode_raster",
    "encode",
    "KEY_ALPHABET",
    "key_length",
    "read_lines",
    "render_document",
    "resolve_color",
    "split_lines",
    "to_grayscale",
    "to_monochrome",
]
