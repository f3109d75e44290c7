"""
Errors
======

Exception hierarchy for border detection.

Taxonomy:
    - InvalidParameterError: caller supplied an out-of-range tunable
      (density, depth, threshold, negative limits). Raised before any
      decoding happens and never silently clamped.
    - DecodeError: the image could not be decoded or an animation frame
      could not be composited. No partial report is produced.

I/O errors from opening a path (FileNotFoundError, PermissionError, ...)
are NOT wrapped and reach the caller unchanged.
"""


class EnimdaError(Exception):
    """Base class for all border detection errors."""
    pass


class InvalidParameterError(EnimdaError, ValueError):
    """Raised when a tunable parameter is outside its documented bounds."""
    pass


class DecodeError(EnimdaError):
    """Raised when image decoding or frame compositing fails."""
    pass
