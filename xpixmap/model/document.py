from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..errors import XpmArgumentError, XpmRangeError
from .colors import ColorTable
from .constants import FILE_TYPE_MARKER, NEWLINE
from .extensions import Extensions
from .header import Header
from .pixels import PixelGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """A parsed XPM image: header, color table, pixel grid and extension lines."""

    header: Optional[Header]
    colors: Optional[ColorTable]
    pixels: Optional[PixelGrid]
    extensions: Optional[Extensions] = None

    @property
    def is_valid(self) -> bool:
        return self.header is not None and self.colors is not None and self.pixels is not None

    @classmethod
    def parse(cls, source: Optional[Sequence[Optional[str]]]) -> "Document":
        if source is None:
            raise XpmArgumentError("Parameter 'source' must not be null.")
        if len(source) < 1:
            raise XpmRangeError("Parameter 'source' must consist of at least one line.")
        if any(line is None for line in source):
            raise XpmRangeError("Parameter 'source' contains at least one null line.")

        lines: List[str] = list(source)
        skip = 0
        if lines[0].lstrip().startswith(FILE_TYPE_MARKER):
            skip = 1
        if len(lines) < skip + 1:
            raise XpmRangeError("Parameter 'source' must consist of at least the header.")

        header = Header.parse(lines[skip])
        skip += 1
        take = max(header.number_of_colors, 0)
        colors = ColorTable.parse(header, lines[skip : skip + take])
        skip += take
        take = max(header.height, 0)
        pixels = PixelGrid.parse(header, lines[skip : skip + take])
        skip += take
        extensions = Extensions.parse(header, lines[skip:])

        logger.debug(
            "Parsed XPM %dx%d with %d colors, %d extension lines",
            header.width,
            header.height,
            len(colors),
            len(extensions.lines),
        )
        return cls(header, colors, pixels, extensions)

    def serialize(self) -> str:
        sections: List[str] = []
        if self.header is not None:
            sections.append(self.header.serialize())
        if self.colors is not None:
            sections.extend(self.colors.serialize_lines())
        if self.pixels is not None:
            sections.append(self.pixels.serialize())
        if self.extensions is not None:
            sections.append(self.extensions.serialize())
        result = "".join(section + NEWLINE for section in sections)
        if result.endswith(NEWLINE * 2):
            return result[: -len(NEWLINE)]
        return result

    def __str__(self) -> str:
        return self.serialize()
