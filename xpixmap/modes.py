from __future__ import annotations

from enum import IntFlag
from typing import Union


class ColorMode(IntFlag):
    """Selects which color variant is read on decode or written on encode."""

    DEFAULT = 0x00000000
    COLORED = 0x00000001
    GRAYSCALE = 0x00000002
    MONOCHROME = 0x00000004
    BEST_FIT = 0x10000000

    @classmethod
    def resolve(cls, mode: Union["ColorMode", int]) -> "ColorMode":
        """Expand DEFAULT and BEST_FIT into the variant flags they stand for."""
        mode = cls(mode)
        if mode == cls.DEFAULT:
            return cls.COLORED
        if mode == cls.BEST_FIT:
            return cls.COLORED | cls.GRAYSCALE | cls.MONOCHROME
        return mode


MODE_NAMES = {
    "default": ColorMode.DEFAULT,
    "colored": ColorMode.COLORED,
    "grayscale": ColorMode.GRAYSCALE,
    "monochrome": ColorMode.MONOCHROME,
    "bestfit": ColorMode.BEST_FIT,
}
