"""Exception types raised by the helpers."""
from __future__ import annotations


class UtilbeltError(Exception):
    """Base class for every error raised by this package."""


class IndexOutOfRange(UtilbeltError, IndexError):
    """A character offset falls outside the string."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index {index} out of range for string of length {length}")
        self.index = index
        self.length = length


class InvalidRangeError(UtilbeltError, ValueError):
    """A lower bound lies above its upper bound."""


class EmptySequenceError(UtilbeltError, ValueError):
    """An aggregate that needs at least one element received none."""


class ZeroLengthVectorError(UtilbeltError, ZeroDivisionError):
    """A zero-length vector cannot be normalized."""


class InvalidPatternError(UtilbeltError, ValueError):
    """A regular expression failed to compile."""


class ResourceError(UtilbeltError, OSError):
    """A resource file could not be located, loaded or decoded."""


class ConfigError(UtilbeltError, ValueError):
    """A configuration document is malformed."""


__all__ = [
    "UtilbeltError",
    "IndexOutOfRange",
    "InvalidRangeError",
    "EmptySequenceError",
    "ZeroLengthVectorError",
    "InvalidPatternError",
    "ResourceError",
    "ConfigError",
]
