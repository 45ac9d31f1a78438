from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Sequence

from ..errors import XpmArgumentError, XpmFormatError, XpmRangeError, XpmUnsupportedError
from .header import Header
from .named_colors import NamedColorRegistry

TRANSPARENT = 0x00FFFFFF

_HEX_RE = re.compile(r"^[0-9A-Fa-f]{8}$")


def format_argb(argb: int) -> str:
    return f"#{argb & 0xFFFFFFFF:08X}"


def parse_color(value: str, index: int = 0) -> int:
    """Resolve a color literal ("None", "#rgb", "#rrggbb", "#aarrggbb" or a name) to ARGB.

    ``index`` is the zero-based color line the literal came from and is only
    used in error messages.
    """
    if value.casefold() == "none":
        return TRANSPARENT
    if value.startswith("#"):
        digits = value.lstrip("#")
        if len(digits) == 3:
            digits = "FF" + "".join(ch * 2 for ch in digits)
        elif len(digits) == 6:
            digits = "FF" + digits
        elif len(digits) != 8:
            raise XpmFormatError(f"RGB color value '#{digits}' at '{index + 1}' is invalid.")
        if not _HEX_RE.match(digits):
            raise XpmFormatError(f"Unable to convert RGB value '{value}' at '{index + 1}' into a valid color.")
        return int(digits, 16)
    if value.startswith("%"):
        raise XpmUnsupportedError("The HSV color space is not supported.")
    argb = NamedColorRegistry.load().get(value)
    if argb is None:
        raise XpmUnsupportedError(f"The color name '{value}' is not supported.")
    return argb


@dataclass(frozen=True)
class ColorEntry:
    """One palette line: the pixel key and the variants it defines."""

    pixel_key: str
    coloration: Optional[int] = None
    monochrome: Optional[int] = None
    grayscaled: Optional[int] = None
    symbolic: Optional[str] = None

    @classmethod
    def parse(cls, line: Optional[str], index: int, characters_per_pixel: int) -> "ColorEntry":
        if line is None or not line.strip():
            raise XpmRangeError(f"Color definition line at '{index + 1}' must not be null, empty or white space.")
        if len(line) < characters_per_pixel:
            raise XpmFormatError(f"Color definition '{line}' at '{index + 1}' is less than minimal required.")

        pixel_key = line[:characters_per_pixel]
        tokens = line[characters_per_pixel:].split()
        if not tokens:
            raise XpmFormatError(f"Color definition '{line}' at '{index + 1}' does not contain any valid definition.")
        if len(tokens) % 2 != 0:
            raise XpmFormatError(
                f"Color definition '{line}' at '{index + 1}' does not contain a processable color definition."
            )

        fields: Dict[str, object] = {}
        for offset in range(0, len(tokens), 2):
            label, value = tokens[offset], tokens[offset + 1]
            kind = label.casefold()
            if kind == "s":
                fields["symbolic"] = value
            elif kind == "c":
                fields["coloration"] = parse_color(value, index)
            elif kind == "m":
                fields["monochrome"] = parse_color(value, index)
            elif kind in ("g", "g4"):
                # Grayscale keeps the first definition; "c" and "m" keep the last.
                if "grayscaled" not in fields:
                    fields["grayscaled"] = parse_color(value, index)
            else:
                raise XpmUnsupportedError(f"Color key '{label}' with color value '{value}' is not supported.")
        return cls(pixel_key, **fields)

    def serialize(self) -> str:
        parts = [self.pixel_key]
        if self.coloration is not None:
            parts.append(f"c {format_argb(self.coloration)}")
        if self.monochrome is not None:
            parts.append(f"m {format_argb(self.monochrome)}")
        if self.grayscaled is not None:
            parts.append(f"g {format_argb(self.grayscaled)}")
        if self.symbolic and self.symbolic.strip():
            parts.append(f"s {self.symbolic}")
        return " ".join(parts)

    def __str__(self) -> str:
        return self.serialize()


class ColorTable(Mapping[str, ColorEntry]):
    """Palette keyed by pixel key, in source line order."""

    def __init__(self, entries: Sequence[ColorEntry] = ()) -> None:
        self._entries: Dict[str, ColorEntry] = {}
        for entry in entries:
            self._entries[entry.pixel_key] = entry

    @classmethod
    def parse(cls, header: Header, lines: Optional[Sequence[str]]) -> "ColorTable":
        if header is None:
            raise XpmArgumentError("Parameter 'header' must not be null.")
        if header.characters_per_pixel < 1:
            raise XpmRangeError("Parameter 'header' does not contain expected number of characters per pixel.")
        if not lines:
            raise XpmArgumentError("Parameter 'source' must not be null or empty.")

        colors = list(lines[: max(header.number_of_colors, 0)])
        if len(colors) < header.number_of_colors:
            raise XpmRangeError(
                "Parameter 'source' does not contain expected number of color lines. "
                f"Expected: '{header.number_of_colors}', Actual: '{len(colors)}'"
            )

        entries: List[ColorEntry] = []
        seen = set()
        for index, line in enumerate(colors):
            entry = ColorEntry.parse(line, index, header.characters_per_pixel)
            if entry.pixel_key in seen:
                raise XpmFormatError(f"Color definition line at '{index + 1}' is present twice.")
            seen.add(entry.pixel_key)
            entries.append(entry)
        return cls(entries)

    def serialize_lines(self) -> List[str]:
        return [entry.serialize() for entry in self._entries.values()]

    def serialize(self) -> str:
        return "\n".join(self.serialize_lines())

    def __getitem__(self, key: str) -> ColorEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ColorTable({list(self._entries.values())!r})"
