from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..errors import XpmFormatError, XpmRangeError
from .constants import XPM_EXT_TAG

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"^[+-]?[0-9]+$")


def parse_int(token: str) -> Optional[int]:
    """Return the integer value of a decimal token, or None if it is not one."""
    if not _INT_RE.match(token):
        return None
    return int(token)


def _is_ext_tag(token: str) -> bool:
    return token.casefold() == XPM_EXT_TAG.casefold()


@dataclass(frozen=True)
class Header:
    """The values line: dimensions, palette size, key width, hotspot, extension flag."""

    width: int
    height: int
    number_of_colors: int
    characters_per_pixel: int
    hotspot: Optional[Tuple[int, int]] = None
    has_extensions: bool = False

    @classmethod
    def parse(cls, line: Optional[str]) -> "Header":
        if line is None or not line.strip():
            raise XpmRangeError("Parameter 'source' must not be null, empty or white space.")
        values = line.split()
        if len(values) < 4:
            raise XpmFormatError("Header must consist of at least four values.")

        numbers: List[int] = []
        for name, token in zip(("Width", "Height", "NumberOfColors", "CharactersPerPixel"), values):
            value = parse_int(token)
            if value is None:
                raise XpmFormatError(f"Unable to convert value of '{name}' into an integer.")
            numbers.append(value)

        hotspot = None
        extensions = False
        if len(values) > 4:
            extensions = _is_ext_tag(values[4])
        if not extensions and len(values) > 5:
            hotspot = (cls._hotspot_value(values[4]), cls._hotspot_value(values[5]))
        if not extensions and len(values) > 6:
            extensions = _is_ext_tag(values[6])

        width, height, number_of_colors, characters_per_pixel = numbers
        return cls(width, height, number_of_colors, characters_per_pixel, hotspot, extensions)

    @staticmethod
    def _hotspot_value(token: str) -> int:
        # Unparsable hotspot coordinates fall back to zero instead of failing.
        value = parse_int(token)
        if value is None:
            logger.warning("Hotspot value '%s' is not an integer, using 0", token)
            return 0
        return value

    def serialize(self) -> str:
        parts = [str(self.width), str(self.height), str(self.number_of_colors), str(self.characters_per_pixel)]
        if self.hotspot is not None:
            parts.extend(str(value) for value in self.hotspot)
        if self.has_extensions:
            parts.append(XPM_EXT_TAG)
        return " ".join(parts).strip()

    def __str__(self) -> str:
        return self.serialize()
