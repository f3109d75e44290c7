"""
Analysis Module
===============

Entropy-based border search.

Components:
    - entropy: Shannon entropy of a luma region
    - preprocess: Resize, grayscale, column sampling
    - scanner: Per-edge search and four-edge rotation cycle
    - aggregator: Multi-frame sampling and element-wise minimum
"""

from enimda.analysis.entropy import entropy
from enimda.analysis.preprocess import (
    normalize,
    prepare,
    resize_to_fit,
    sample_columns,
    to_grayscale,
)
from enimda.analysis.scanner import SIDES, scan_frame, scan_one_side
from enimda.analysis.aggregator import (
    ArrayFrames,
    FrameSource,
    aggregate,
    combine,
    select_frames,
)

__all__ = [
    # Entropy
    "entropy",
    # Preprocessing
    "normalize",
    "prepare",
    "resize_to_fit",
    "sample_columns",
    "to_grayscale",
    # Scanning
    "SIDES",
    "scan_frame",
    "scan_one_side",
    # Aggregation
    "ArrayFrames",
    "FrameSource",
    "aggregate",
    "combine",
    "select_frames",
]
