"""
Entropy Evaluator
=================

Shannon entropy of the luma distribution over a rectangular region.

Formula:
    H = -sum(p_i * log2(p_i)), p_i = count_i / area

A single-valued region has H = 0. For 8-bit luma H <= log2(256) = 8 bits.
"""

import numpy as np


def entropy(buffer: np.ndarray, x: int, y: int, width: int, height: int) -> float:
    """
    Compute the entropy in bits of buffer[y:y+height, x:x+width].
    
    Args:
        buffer: Single-channel luma buffer (H, W), unsigned integer dtype
        x: Left column of the region
        y: Top row of the region
        width: Region width in columns
        height: Region height in rows
        
    Returns:
        Entropy in bits (0.0 for empty or uniform regions)
        
    Raises:
        ValueError: If the region has negative geometry or leaves the buffer
    """
    rows, cols = buffer.shape[:2]
    if x < 0 or y < 0 or width < 0 or height < 0:
        raise ValueError(f"Negative region geometry: x={x}, y={y}, w={width}, h={height}")
    if x + width > cols or y + height > rows:
        raise ValueError(
            f"Region ({x}, {y}, {width}, {height}) exceeds buffer of "
            f"{cols}x{rows}"
        )
    
    region = buffer[y:y + height, x:x + width]
    area = region.size
    if area == 0:
        return 0.0
    
    counts = np.bincount(region.ravel())
    counts = counts[counts > 0]
    if counts.size == 1:
        return 0.0
    
    probabilities = counts / area
    return float(-np.sum(probabilities * np.log2(probabilities)))
