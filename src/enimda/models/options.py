"""
Scan Options
============

Validated tunables for one detection run.

Fail-fast rule: out-of-range values raise InvalidParameterError at
construction time. Nothing is clamped.
"""

from dataclasses import dataclass
from typing import Optional

from enimda.errors import InvalidParameterError


@dataclass(frozen=True, slots=True)
class ScanOptions:
    """
    Detection parameters shared by every frame of one run.
    
    Attributes:
        frames: Frame sample limit for animations (None/0 = every frame)
        size: Max working dimension in pixels (None/0 = no resize)
        columns: Column sample limit per edge (None/0 = every column)
        depth: Fraction of the working height searched per edge, [0, 1]
        threshold: Entropy ratio below which a row is a border, (0, 1]
        deep: Keep refining each edge while the border moves inward
        frame_density: Explicit strata density for frame sampling
        column_density: Explicit strata density for column sampling
    """
    
    frames: Optional[int] = None
    size: Optional[int] = None
    columns: Optional[int] = None
    depth: float = 0.25
    threshold: float = 0.5
    deep: bool = True
    frame_density: Optional[float] = None
    column_density: Optional[float] = None
    
    def __post_init__(self) -> None:
        """Validate invariants."""
        for name in ("frames", "size", "columns"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidParameterError(f"{name} must be non-negative, got {value}")
        
        if not 0.0 <= self.depth <= 1.0:
            raise InvalidParameterError(f"0.0 <= depth <= 1.0 expected, got {self.depth}")
        if not 0.0 < self.threshold <= 1.0:
            raise InvalidParameterError(
                f"0.0 < threshold <= 1.0 expected, got {self.threshold}"
            )
        
        for name in ("frame_density", "column_density"):
            value = getattr(self, name)
            if value is not None and not 0.0 <= value <= 1.0:
                raise InvalidParameterError(f"0.0 <= {name} <= 1.0 expected, got {value}")
