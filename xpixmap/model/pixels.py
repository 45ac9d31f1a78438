from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..errors import XpmArgumentError, XpmFormatError, XpmRangeError
from .header import Header


def _split_row(line: str, row: int, cols: int, cpp: int) -> Tuple[str, ...]:
    if len(line) < cols * cpp:
        raise XpmFormatError(f"Pixel line at '{row + 1}' must have at least a length of '{cols * cpp}'.")
    return tuple(line[col * cpp : (col + 1) * cpp] for col in range(cols))


@dataclass(frozen=True)
class PixelGrid:
    """Pixel keys stored row by row; index with ``grid[col, row]``."""

    rows: Tuple[Tuple[str, ...], ...]

    @classmethod
    def parse(cls, header: Header, lines: Optional[Sequence[Optional[str]]]) -> "PixelGrid":
        if header is None:
            raise XpmArgumentError("Parameter 'header' must not be null.")
        if header.width < 1:
            raise XpmRangeError("The width must not be less than one.")
        if header.height < 1:
            raise XpmRangeError("The height must not be less than one.")
        if header.characters_per_pixel < 1:
            raise XpmRangeError("The characters per pixel must not be less than one.")
        if not lines:
            raise XpmArgumentError("Parameter 'source' must not be null or empty.")
        if header.height > len(lines):
            raise XpmRangeError(f"Parameter 'source' must have at least a number of '{header.height}' lines.")

        rows = [
            _split_row(lines[row] or "", row, header.width, header.characters_per_pixel)
            for row in range(header.height)
        ]
        return cls(tuple(rows))

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def __getitem__(self, position: Tuple[int, int]) -> str:
        col, row = position
        return self.rows[row][col]

    def serialize_lines(self) -> List[str]:
        return ["".join(row) for row in self.rows]

    def serialize(self) -> str:
        return "\n".join(self.serialize_lines())

    def __str__(self) -> str:
        return self.serialize()
