"""
Border Models
=============

Output contract of the border detector.

Output Contract:
    {
        "top": 20,
        "right": 0,
        "bottom": 12,
        "left": 0
    }

All offsets are measured in pixels of the ORIGINAL image (before any
resize), from the corresponding edge toward the image center.
"""

from typing import Sequence, Tuple

from pydantic import BaseModel, Field


class Borders(BaseModel):
    """
    Border offsets for the four edges of an image.
    
    Attributes:
        top: Offset from the top edge
        right: Offset from the right edge
        bottom: Offset from the bottom edge
        left: Offset from the left edge
    """
    
    top: int = Field(..., ge=0, description="Border offset from the top")
    right: int = Field(..., ge=0, description="Border offset from the right")
    bottom: int = Field(..., ge=0, description="Border offset from the bottom")
    left: int = Field(..., ge=0, description="Border offset from the left")
    
    @classmethod
    def from_vector(cls, vector: Sequence[int]) -> "Borders":
        """Build from an ordered (top, right, bottom, left) vector."""
        top, right, bottom, left = vector
        return cls(top=top, right=right, bottom=bottom, left=left)
    
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return offsets as (top, right, bottom, left)."""
        return (self.top, self.right, self.bottom, self.left)
