import pytest
from PIL import Image

from xpixmap.raster import Raster, argb_to_rgba, rgba_to_argb


def test_argb_rgba_conversion():
    assert argb_to_rgba(0x80102030) == (0x10, 0x20, 0x30, 0x80)
    assert rgba_to_argb((0x10, 0x20, 0x30, 0x80)) == 0x80102030


def test_image_conversion():
    raster = Raster([0xFFFF0000, 0x00FFFFFF, 0xFF00FF00, 0xFF0000FF], 2)
    img = raster.to_image()
    assert img.size == (2, 2)
    assert Raster.from_image(img) == raster


def test_validate():
    with pytest.raises(ValueError):
        Raster([1, 2, 3], 2).validate()
    with pytest.raises(ValueError):
        Raster([], 0).validate()


def test_from_image_reads_rgba_bytes():
    img = Image.new("RGBA", (2, 1))
    img.putpixel((0, 0), (0x10, 0x20, 0x30, 0x80))
    img.putpixel((1, 0), (0xFF, 0x00, 0x00, 0xFF))
    assert Raster.from_image(img).pixels == [0x80102030, 0xFFFF0000]
    assert Raster.from_image(img.convert("RGB")).pixels == [0xFF102030, 0xFFFF0000]
