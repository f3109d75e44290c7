"""
Frame Aggregator
================

Runs the per-frame scan over a sampled subset of an image's frames and
folds the results with an element-wise minimum.

The minimum is the conservative choice: content that reaches closer to
an edge in ANY sampled frame limits the border on that edge.

Frame Sources:
    Anything with a `frame_count` and a `frames(indices)` iterator fits
    the FrameSource protocol. The Pillow-backed decoder provides one for
    files; ArrayFrames wraps frames already held in memory.
"""

import logging
import random
from typing import Iterable, Iterator, Optional, Protocol, Sequence, Set, Tuple

import numpy as np

from enimda.analysis.scanner import scan_frame
from enimda.errors import DecodeError
from enimda.models.borders import Borders
from enimda.models.options import ScanOptions
from enimda.sampling import resolve_density, sample


logger = logging.getLogger(__name__)


BorderVector = Tuple[int, int, int, int]


class FrameSource(Protocol):
    """
    Protocol for anything that yields decoded frames.
    
    Implementations must yield frames in index order and skip indices
    not in `indices` (None = every frame).
    """
    
    @property
    def frame_count(self) -> int:
        """Total number of frames."""
        ...
    
    def frames(self, indices: Optional[Set[int]] = None) -> Iterator[np.ndarray]:
        """Iterate decoded frames, restricted to `indices` when given."""
        ...


class ArrayFrames:
    """
    In-memory frame source.
    
    Example:
        source = ArrayFrames([frame_a, frame_b])
        borders = aggregate(source, ScanOptions())
    """
    
    def __init__(self, frames: Sequence[np.ndarray]) -> None:
        self._frames = list(frames)
    
    @property
    def frame_count(self) -> int:
        return len(self._frames)
    
    def frames(self, indices: Optional[Set[int]] = None) -> Iterator[np.ndarray]:
        for index, frame in enumerate(self._frames):
            if indices is None or index in indices:
                yield frame


def select_frames(
    frame_count: int,
    limit: Optional[int],
    density: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> Optional[Set[int]]:
    """
    Pick the frames to scan.
    
    Returns:
        Set of frame indices, or None to scan every frame
    """
    if frame_count <= 1:
        return None
    return sample(frame_count, resolve_density(frame_count, limit, density), limit or 0, rng)


def combine(vectors: Iterable[BorderVector]) -> Optional[BorderVector]:
    """Element-wise minimum of border vectors; None for no vectors."""
    result: Optional[BorderVector] = None
    for vector in vectors:
        if result is None:
            result = vector
        else:
            result = (
                min(result[0], vector[0]),
                min(result[1], vector[1]),
                min(result[2], vector[2]),
                min(result[3], vector[3]),
            )
    return result


def aggregate(
    source: FrameSource,
    options: ScanOptions,
    rng: Optional[random.Random] = None,
) -> Borders:
    """
    Detect borders across the sampled frames of a source.
    
    Args:
        source: Frame source (decoded file or in-memory frames)
        options: Detection parameters
        rng: Random generator shared by frame and column sampling
        
    Returns:
        Borders folded with an element-wise minimum
        
    Raises:
        DecodeError: If no frame could be produced or decoding fails
            mid-iteration
    """
    if rng is None:
        rng = random.Random()
    
    indices = select_frames(source.frame_count, options.frames, options.frame_density, rng)
    
    vectors = [scan_frame(frame, options, rng) for frame in source.frames(indices)]
    
    result = combine(vectors)
    if result is None:
        raise DecodeError("Image produced no frames to scan")
    
    logger.info(
        f"Aggregated {len(vectors)}/{source.frame_count} frames: "
        f"top={result[0]}, right={result[1]}, bottom={result[2]}, left={result[3]}"
    )
    
    return Borders.from_vector(result)
