import logging

import pytest

from xpixmap.errors import XpmFormatError, XpmRangeError
from xpixmap.model import Header


def test_parse_plain_header():
    header = Header.parse("6 6 3 1")
    assert header == Header(6, 6, 3, 1, hotspot=None, has_extensions=False)
    assert header.serialize() == "6 6 3 1"
    assert str(header) == "6 6 3 1"


def test_parse_collapses_whitespace():
    header = Header.parse("  16\t8   4 2  ")
    assert (header.width, header.height, header.number_of_colors, header.characters_per_pixel) == (16, 8, 4, 2)


def test_extension_flag_in_fifth_position():
    header = Header.parse("16 16 4 1 xpmext")
    assert header.has_extensions
    assert header.hotspot is None
    assert header.serialize() == "16 16 4 1 XPMEXT"


def test_extension_flag_blocks_hotspot():
    header = Header.parse("16 16 4 1 XPMEXT 3 5")
    assert header.has_extensions
    assert header.hotspot is None


def test_hotspot():
    header = Header.parse("16 16 4 1 3 5")
    assert header.hotspot == (3, 5)
    assert not header.has_extensions
    assert header.serialize() == "16 16 4 1 3 5"


def test_hotspot_and_extensions():
    header = Header.parse("16 16 4 1 3 5 XpmExt")
    assert header.hotspot == (3, 5)
    assert header.has_extensions
    assert header.serialize() == "16 16 4 1 3 5 XPMEXT"


def test_single_extra_token_is_ignored():
    header = Header.parse("16 16 4 1 7")
    assert header.hotspot is None
    assert not header.has_extensions


def test_unparsable_hotspot_defaults_to_zero(caplog):
    with caplog.at_level(logging.WARNING, logger="xpixmap.model.header"):
        header = Header.parse("16 16 4 1 x 5")
    assert header.hotspot == (0, 5)
    assert "Hotspot value 'x'" in caplog.text


@pytest.mark.parametrize("line", [None, "", "   "])
def test_blank_header_is_out_of_range(line):
    with pytest.raises(XpmRangeError, match="must not be null, empty or white space"):
        Header.parse(line)


def test_too_few_values():
    with pytest.raises(XpmFormatError, match="at least four values"):
        Header.parse("6 6 3")


@pytest.mark.parametrize(
    "line, field",
    [
        ("x 6 3 1", "Width"),
        ("6 x 3 1", "Height"),
        ("6 6 x 1", "NumberOfColors"),
        ("6 6 3 1.5", "CharactersPerPixel"),
        ("6_0 6 3 1", "Width"),
    ],
)
def test_field_specific_errors(line, field):
    with pytest.raises(XpmFormatError, match=f"value of '{field}'"):
        Header.parse(line)
