"""
Exception types raised by Coat of Arms Core.

Each error also derives from the closest built-in exception so callers
that already catch ValueError / OSError keep working.
"""


class CoatOfArmsError(Exception):
    """Base class for all library errors."""


class InvalidDimensionError(CoatOfArmsError, ValueError):
    """A larger image was asked to fit inside a smaller one, or a size was not positive."""


class AssetNotFoundError(CoatOfArmsError, FileNotFoundError):
    """No asset matched a selection criterion."""


class UnsupportedFormatError(CoatOfArmsError, ValueError):
    """A file extension has no known image format."""


class EncodeFailureError(CoatOfArmsError, OSError):
    """The image encoder or the file write failed. The original error is the __cause__."""
