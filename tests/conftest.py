from __future__ import annotations

from typing import List, Sequence, Tuple

import pytest
from PIL import Image

CHECKER_XPM = [
    "  !XPM",
    "10 10 3 1",
    "  C NONE",
    "+ C #FFF",
    "- C #000",
    " +- +- +- ",
    "+- +- +- +",
    "- +- +- +-",
    " +- +- +- ",
    "+- +- +- +",
    "- +- +- +-",
    " +- +- +- ",
    "+- +- +- +",
    "- +- +- +-",
    "----------",
]

TWO_COLOR_XPM = [
    "2 2 2 1",
    "+ c #f00 g #aaa m #000",
    "- c #00f g #bbb m #fff",
    "++",
    "--",
]


def make_image(size: Tuple[int, int], pixels: Sequence[Tuple[int, int, int, int]]) -> Image.Image:
    img = Image.new("RGBA", size)
    img.putdata(list(pixels))
    return img


@pytest.fixture
def checker_lines() -> List[str]:
    return list(CHECKER_XPM)


@pytest.fixture
def two_color_lines() -> List[str]:
    return list(TWO_COLOR_XPM)


@pytest.fixture
def red_blue_image() -> Image.Image:
    red = (255, 0, 0, 255)
    blue = (0, 0, 255, 255)
    return make_image((2, 2), [red, red, blue, blue])
