"""
Image Metadata Models
=====================

Typed metadata produced by the decoding layer.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ImageInfo:
    """
    Format and geometry of a decoded image.
    
    Attributes:
        width: Canvas width in pixels
        height: Canvas height in pixels
        format: Container format tag reported by the codec (e.g. "GIF")
        frame_count: Number of frames (1 for static images)
    """
    
    width: int
    height: int
    format: str
    frame_count: int
    
    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        if self.frame_count < 1:
            raise ValueError("frame_count must be at least 1")
    
    @property
    def is_animated(self) -> bool:
        """True when the image carries more than one frame."""
        return self.frame_count > 1
