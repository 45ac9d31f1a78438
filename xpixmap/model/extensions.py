from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..errors import XpmArgumentError
from .constants import XPM_EXT_END, XPM_EXT_TAG
from .header import Header


def _starts_with(line: str, tag: str) -> bool:
    return line[: len(tag)].casefold() == tag.casefold()


@dataclass(frozen=True)
class Extensions:
    """Lines of the XPMEXT block with their tags removed.

    Extension names and their data are not told apart; every non-blank line up
    to XPMENDEXT is kept in order.
    """

    lines: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, header: Header, lines: Optional[Sequence[str]]) -> "Extensions":
        if header is None:
            raise XpmArgumentError("Parameter 'header' must not be null.")
        if not header.has_extensions:
            return cls()
        if lines is None:
            raise XpmArgumentError("Parameter 'source' must not be null.")

        result: List[str] = []
        for line in lines:
            if _starts_with(line.lstrip(), XPM_EXT_END):
                break
            if _starts_with(line.lstrip(), XPM_EXT_TAG):
                line = line.lstrip()[len(XPM_EXT_TAG) :].lstrip()
            if line.strip():
                result.append(line)
        return cls(tuple(result))

    def serialize_lines(self) -> List[str]:
        if not self.lines:
            return []
        return [f"{XPM_EXT_TAG} {line}" for line in self.lines] + [XPM_EXT_END]

    def serialize(self) -> str:
        return "\n".join(self.serialize_lines())

    def __str__(self) -> str:
        return self.serialize()
