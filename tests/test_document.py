import pytest

from xpixmap.errors import XpmArgumentError, XpmError, XpmRangeError
from xpixmap.model import Document


def test_parse_with_file_type_marker(checker_lines):
    document = Document.parse(checker_lines)
    assert document.is_valid
    assert (document.header.width, document.header.height) == (10, 10)
    assert list(document.colors) == [" ", "+", "-"]
    assert document.pixels.height == 10
    assert document.pixels[0, 0] == " "
    assert document.pixels[9, 9] == "-"
    assert document.extensions.lines == ()


def test_parse_without_marker(two_color_lines):
    document = Document.parse(two_color_lines)
    assert document.header.number_of_colors == 2
    assert document.pixels.serialize_lines() == ["++", "--"]


def test_serialize(two_color_lines):
    document = Document.parse(two_color_lines)
    assert document.serialize() == (
        "2 2 2 1\n"
        "+ c #FFFF0000 m #FF000000 g #FFAAAAAA\n"
        "- c #FF0000FF m #FFFFFFFF g #FFBBBBBB\n"
        "++\n"
        "--\n"
    )


def test_serialize_with_extensions():
    document = Document.parse(["2 1 1 1 XPMEXT", "a c red", "aa", "XPMEXT foo", "bar", "XPMENDEXT"])
    assert document.extensions.lines == ("foo", "bar")
    assert str(document) == "2 1 1 1 XPMEXT\na c #FFFF0000\naa\nXPMEXT foo\nXPMEXT bar\nXPMENDEXT\n"


def test_round_trip(checker_lines):
    document = Document.parse(checker_lines)
    again = Document.parse(document.serialize().splitlines())
    assert again == document
    assert again.serialize() == document.serialize()


def test_invalid_when_sections_missing():
    assert not Document(None, None, None).is_valid


def test_none_source():
    with pytest.raises(XpmArgumentError):
        Document.parse(None)


def test_empty_source():
    with pytest.raises(XpmRangeError, match="at least one line"):
        Document.parse([])


def test_none_line():
    with pytest.raises(XpmRangeError, match="null line"):
        Document.parse(["1 1 1 1", None, "a"])


def test_only_marker():
    with pytest.raises(XpmRangeError, match="at least the header"):
        Document.parse(["! XPM2"])


def test_section_failure_aborts_parse():
    # Three colors announced but only two color lines: the first pixel row is read as a color.
    with pytest.raises(XpmError):
        Document.parse(["2 2 3 1", "a c red", "b c blue", "ab", "ba"])
