"""
Preprocessor
============

Turns a decoded frame into the working buffer the edge scanner reads.

Pipeline:
    1. Resize so the longer side fits `max_size` (scale factor recorded)
    2. Convert to single-channel 8-bit luma
    3. Keep a stratified random sample of columns

The scale factor maps rows of the working buffer back to pixels of the
original frame: original = working * scale.
"""

import logging
import random
from typing import Optional, Tuple

import cv2
import numpy as np

from enimda.errors import InvalidParameterError
from enimda.sampling import resolve_density, round_half_up, sample


logger = logging.getLogger(__name__)


def resize_to_fit(image: np.ndarray, max_size: Optional[int]) -> Tuple[float, np.ndarray]:
    """
    Downscale an image so its longer side equals `max_size`.
    
    Args:
        image: Image array (H, W) or (H, W, C)
        max_size: Maximum allowed dimension (None or 0 = no cap)
        
    Returns:
        Tuple of (scale_factor, image). scale_factor is 1.0 and the input
        is returned untouched when no resize is needed.
    """
    if not max_size:
        return 1.0, image
    
    height, width = image.shape[:2]
    longest = max(width, height)
    if longest <= max_size:
        return 1.0, image
    
    scale = longest / max_size
    new_width = max(1, round_half_up(width / scale))
    new_height = max(1, round_half_up(height / scale))
    
    resized = cv2.resize(image, (new_width, new_height), interpolation=cv2.INTER_AREA)
    return scale, resized


def to_grayscale(image: np.ndarray) -> np.ndarray:
    """
    Convert an RGB, RGBA or single-channel array to 8-bit luma.
    
    Raises:
        InvalidParameterError: If the array is not uint8 or has an
            unsupported channel layout
    """
    if image.dtype != np.uint8:
        raise InvalidParameterError(f"uint8 image expected, got {image.dtype}")
    
    if image.ndim == 2:
        return image
    
    if image.ndim == 3:
        channels = image.shape[2]
        if channels == 1:
            return image[:, :, 0]
        if channels == 3:
            return cv2.cvtColor(image, cv2.COLOR_RGB2GRAY)
        if channels == 4:
            return cv2.cvtColor(image, cv2.COLOR_RGBA2GRAY)
    
    raise InvalidParameterError(f"Unsupported image shape: {image.shape}")


def normalize(frame: np.ndarray, max_size: Optional[int]) -> Tuple[float, np.ndarray]:
    """Resize then convert to luma; returns (scale_factor, gray)."""
    scale, resized = resize_to_fit(frame, max_size)
    gray = to_grayscale(resized)
    
    if scale != 1.0:
        logger.debug(
            f"Resized {frame.shape[1]}x{frame.shape[0]} -> "
            f"{gray.shape[1]}x{gray.shape[0]} (scale={scale:.3f})"
        )
    
    return scale, gray


def sample_columns(
    buffer: np.ndarray,
    density: Optional[float],
    limit: Optional[int],
    rng: Optional[random.Random] = None,
) -> np.ndarray:
    """
    Build a strip from a stratified sample of the buffer's columns.
    
    Columns keep their full height and row order but appear in draw order;
    the strip is a content sample, not a crop.
    
    Args:
        buffer: Luma buffer (H, W)
        density: Strata density (None = derived from limit)
        limit: Maximum number of columns (None or 0 = keep every column)
        rng: Random generator for the sampler
        
    Returns:
        The buffer itself when sampling is bypassed, else a new (H, n) array
    """
    width = buffer.shape[1]
    indices = sample(width, resolve_density(width, limit, density), limit or 0, rng)
    if indices is None:
        return buffer
    
    return buffer[:, np.fromiter(indices, dtype=np.intp, count=len(indices))]


def prepare(
    frame: np.ndarray,
    max_size: Optional[int] = None,
    density: Optional[float] = None,
    limit: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[float, np.ndarray]:
    """
    Produce the working strip for the top edge of a frame.
    
    Covers a single orientation only. The four-edge pass in
    scanner.scan_frame calls normalize() once and re-samples columns with
    sample_columns() after every rotation, so each edge samples across
    its own width.
    
    Returns:
        Tuple of (scale_factor, strip)
    """
    scale, gray = normalize(frame, max_size)
    return scale, sample_columns(gray, density, limit, rng)
