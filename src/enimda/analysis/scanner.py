"""
Edge Scanner
============

Entropy-ratio search for the row where content begins below an edge.

Algorithm (top edge of a strip):
    For a candidate row `center`, compare the entropy of the rows between
    the current border and `center` (upper) with the entropy of an equally
    tall block just below `center` (lower). A ratio upper / lower under
    `threshold` means the block below carries markedly more information,
    so `center` is a plausible content boundary. The smallest ratio wins.

    With `deep` enabled the search restarts from the new border and keeps
    pushing inward until a pass finds no better row.

All four edges reuse the top-edge search: the buffer is rotated 90
degrees counter-clockwise between passes, giving top, right, bottom, left.
"""

import logging
import random
from typing import Optional, Tuple

import numpy as np

from enimda.analysis.entropy import entropy
from enimda.analysis.preprocess import normalize, sample_columns
from enimda.models.options import ScanOptions
from enimda.sampling import round_half_up


logger = logging.getLogger(__name__)


SIDES = ("top", "right", "bottom", "left")


def _locate_start(strip: np.ndarray, border: int, search_height: int) -> int:
    """First row below `border` whose block from the border is non-uniform."""
    width = strip.shape[1]
    for center in range(border + 1, search_height):
        if entropy(strip, 0, border, width, center - border) > 0:
            return center
    return border + 1


def _locate_candidate(
    strip: np.ndarray,
    border: int,
    start: int,
    search_height: int,
    threshold: float,
) -> int:
    """Row in [start, search_height) with the lowest entropy ratio, or 0."""
    height, width = strip.shape[:2]
    sub = 0
    delta = threshold
    
    for center in range(search_height - 1, start - 1, -1):
        span = center - border
        upper = entropy(strip, 0, border, width, span)
        # lower block is clipped at the bottom of the strip
        lower = entropy(strip, 0, center, width, min(span, height - center))
        
        diff = upper / lower if lower != 0 else threshold
        if diff < delta and diff < threshold:
            delta = diff
            sub = center
    
    return sub


def scan_one_side(
    strip: np.ndarray,
    depth: float,
    threshold: float,
    deep: bool,
) -> int:
    """
    Find the border row below the top edge of a strip.
    
    Args:
        strip: Luma working buffer (H, W), edge under test at row 0
        depth: Fraction of the strip height searched, [0, 1]
        threshold: Ratio sensitivity; smaller is more conservative
        deep: Repeat the search from each newly found border
        
    Returns:
        Border row in working-buffer coordinates (0 = no border)
    """
    height = strip.shape[0]
    search_height = round_half_up(depth * height)
    border = 0
    
    while True:
        start = _locate_start(strip, border, search_height)
        sub = _locate_candidate(strip, border, start, search_height, threshold)
        
        if sub == 0 or sub == border:
            break
        
        border = sub
        
        if not deep:
            break
    
    return border


def scan_frame(
    frame: np.ndarray,
    options: ScanOptions,
    rng: Optional[random.Random] = None,
) -> Tuple[int, int, int, int]:
    """
    Scan all four edges of one decoded frame.
    
    Columns are re-sampled after every rotation so each edge samples
    across its own width.
    
    Args:
        frame: Decoded frame, RGB/RGBA/luma uint8 array
        options: Detection parameters
        rng: Random generator for column sampling
        
    Returns:
        (top, right, bottom, left) in original-frame pixels
    """
    scale, gray = normalize(frame, options.size)
    
    borders = []
    for side, name in enumerate(SIDES):
        strip = sample_columns(gray, options.column_density, options.columns, rng)
        raw = scan_one_side(strip, options.depth, options.threshold, options.deep)
        borders.append(round_half_up(raw * scale))
        
        logger.debug(f"Edge {name}: raw={raw}, scaled={borders[-1]}, strip={strip.shape}")
        
        if side != len(SIDES) - 1:
            gray = np.rot90(gray)
    
    return borders[0], borders[1], borders[2], borders[3]
