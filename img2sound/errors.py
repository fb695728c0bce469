from __future__ import annotations


class Img2SoundError(Exception):
    """Base error for img2sound."""


class ScanlineRangeError(Img2SoundError, IndexError):
    """Raised when the requested scanline row lies outside the image."""


class InvalidParameterError(Img2SoundError, ValueError):
    """Raised when a synthesis parameter is outside its allowed range."""


class ImageReadError(Img2SoundError, ValueError):
    """Raised when an image file exists but cannot be decoded."""
