from __future__ import annotations


class XpmError(Exception):
    """Base class for every failure raised while reading or writing XPM data."""


class XpmArgumentError(XpmError, ValueError):
    """A required value was missing."""


class XpmRangeError(XpmError, ValueError):
    """A structural size or line count does not match the header."""


class XpmFormatError(XpmError, ValueError):
    """A numeric token, color literal or fixed-width field is malformed."""


class XpmUnsupportedError(XpmError, ValueError):
    """The input is well formed but uses something this codec does not handle."""


class XpmKeyNotFoundError(XpmError, LookupError):
    """A pixel key is missing from the color table."""
