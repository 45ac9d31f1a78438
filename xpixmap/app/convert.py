from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from PIL import Image

from ..model import Document
from ..modes import ColorMode
from ..rendering import build, decode, read_lines
from .images import IMAGE_EXTENSIONS, load_image, normalize_image
from .snippets import format_snippet

XPM_EXTENSIONS = {".xpm", ".txt"}
SUPPORTED_EXTENSIONS = IMAGE_EXTENSIONS | XPM_EXTENSIONS


@dataclass
class ConvertSettings:
    mode: ColorMode = ColorMode.DEFAULT
    snippet: Optional[str] = None
    encoding: str = "utf-8-sig"


class Converter:
    def __init__(self, settings: Optional[ConvertSettings] = None) -> None:
        self.settings = settings or ConvertSettings()

    def image_to_xpm(self, path: str) -> str:
        """Load a raster image file and return its XPM text (or source snippet)."""
        self._validate_input_path(path, IMAGE_EXTENSIONS)
        img = normalize_image(load_image(path))
        lines = build(img, self.settings.mode)
        if self.settings.snippet:
            return format_snippet(lines, self.settings.snippet)
        return "\n".join(lines) + "\n"

    def xpm_to_image(self, path: str) -> Image.Image:
        self._validate_input_path(path, XPM_EXTENSIONS)
        with open(path, "r", encoding=self.settings.encoding) as handle:
            return decode(handle.read(), self.settings.mode)

    def read_document(self, path: str) -> Document:
        self._validate_input_path(path, XPM_EXTENSIONS)
        with open(path, "r", encoding=self.settings.encoding) as handle:
            return Document.parse(read_lines(handle.read()))

    @staticmethod
    def _validate_input_path(path: str, allowed: set) -> None:
        ext = os.path.splitext(path)[1].lower()
        if ext not in allowed:
            raise ValueError("Supported formats: " + ", ".join(sorted(allowed)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
