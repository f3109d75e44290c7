"""
Border Detector
===============

Public entry points.

Example:
    from enimda import detect_borders
    
    borders = detect_borders("photo.gif", frames=10, size=512, columns=50)
    print(borders.top, borders.right, borders.bottom, borders.left)

Optimization parameters (frames, size, columns) trade accuracy for speed.
Left unset, every frame and every column of the full-size image is used
and the result is deterministic for a given input.
"""

import logging
import random
from typing import Optional, Sequence, Union

import numpy as np

from enimda.analysis.aggregator import ArrayFrames, aggregate
from enimda.decoding.image_decoder import ImageSourceType, open_image
from enimda.models.borders import Borders
from enimda.models.options import ScanOptions


logger = logging.getLogger(__name__)


def detect_borders(
    source: ImageSourceType,
    frames: Optional[int] = None,
    size: Optional[int] = None,
    columns: Optional[int] = None,
    depth: float = 0.25,
    threshold: float = 0.5,
    deep: bool = True,
    frame_density: Optional[float] = None,
    column_density: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> Borders:
    """
    Scan an image and find its borders.
    
    Args:
        source: Path, encoded bytes or binary file object
        frames: Frame limit for animated images (None = every frame)
        size: Fit the image to this size to speed up the scan (None = no resize)
        columns: Column limit per edge (None = every column)
        depth: Fraction of the image height searched per edge
        threshold: Aggressiveness; smaller values find fewer, larger borders
        deep: Iteratively refine each border (slower, more accurate)
        frame_density: Explicit frame strata density in [0, 1]
        column_density: Explicit column strata density in [0, 1]
        rng: Random generator for sampling (seed it for reproducible runs)
        
    Returns:
        Borders in original-image pixels
        
    Raises:
        InvalidParameterError: If a tunable is out of range
        DecodeError: If the image cannot be decoded
        OSError: If the path cannot be opened
    """
    options = ScanOptions(
        frames=frames,
        size=size,
        columns=columns,
        depth=depth,
        threshold=threshold,
        deep=deep,
        frame_density=frame_density,
        column_density=column_density,
    )
    
    with open_image(source) as image:
        logger.info(
            f"Scanning {image.info.format} {image.info.width}x{image.info.height} "
            f"({image.info.frame_count} frames)"
        )
        return aggregate(image, options, rng)


def detect_borders_array(
    image: Union[np.ndarray, Sequence[np.ndarray]],
    frames: Optional[int] = None,
    size: Optional[int] = None,
    columns: Optional[int] = None,
    depth: float = 0.25,
    threshold: float = 0.5,
    deep: bool = True,
    frame_density: Optional[float] = None,
    column_density: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> Borders:
    """
    Same as detect_borders() for images already decoded into memory.
    
    Args:
        image: One uint8 array (H, W[, C]) or a sequence of equally sized
            frames
        
    See detect_borders() for the remaining arguments.
    """
    options = ScanOptions(
        frames=frames,
        size=size,
        columns=columns,
        depth=depth,
        threshold=threshold,
        deep=deep,
        frame_density=frame_density,
        column_density=column_density,
    )
    
    if isinstance(image, np.ndarray):
        source = ArrayFrames([image])
    else:
        source = ArrayFrames(image)
    
    return aggregate(source, options, rng)
