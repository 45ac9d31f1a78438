import pytest

from xpixmap.errors import XpmArgumentError
from xpixmap.model import Extensions, Header

EXT_HEADER = Header(1, 1, 1, 1, has_extensions=True)


def test_without_flag_everything_is_ignored():
    assert Extensions.parse(Header(1, 1, 1, 1), None).lines == ()
    assert Extensions.parse(Header(1, 1, 1, 1), ["XPMEXT foo", "XPMENDEXT"]).lines == ()


def test_collects_tagged_and_continuation_lines():
    lines = [
        "XPMEXT ext1 data1",
        "more data",
        "",
        "xpmext   ext2",
        "  XPMEXT indented",
        "XpmEndExt",
        "XPMEXT after end",
    ]
    extensions = Extensions.parse(EXT_HEADER, lines)
    assert extensions.lines == ("ext1 data1", "more data", "ext2", "indented")


def test_blank_tag_lines_are_dropped():
    assert Extensions.parse(EXT_HEADER, ["XPMEXT", "XPMEXT   ", "XPMENDEXT"]).lines == ()


def test_missing_end_tag_reads_to_the_end():
    assert Extensions.parse(EXT_HEADER, ["XPMEXT a", "b"]).lines == ("a", "b")


def test_serialize():
    extensions = Extensions(("ext1 data1", "ext2"))
    assert extensions.serialize() == "XPMEXT ext1 data1\nXPMEXT ext2\nXPMENDEXT"


def test_serialize_empty():
    assert Extensions().serialize() == ""


def test_requires_lines_when_flagged():
    with pytest.raises(XpmArgumentError):
        Extensions.parse(EXT_HEADER, None)
