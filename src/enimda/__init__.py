"""
ENIMDA
======

Entropy-based image border detection.

Finds uniform margins around the content of raster images, static or
animated, and reports an offset in pixels for each edge.

Components:
    - sampling: Stratified random sampling of frames and columns
    - analysis: Entropy, preprocessing, edge scanning, frame aggregation
    - decoding: Pillow boundary producing numpy frames
    - main: FastAPI service exposing detection over HTTP

Example:
    from enimda import detect_borders
    
    borders = detect_borders("banner.png")
    print(borders.model_dump())
"""

__version__ = "0.1.0"

from enimda.detector import detect_borders, detect_borders_array
from enimda.errors import DecodeError, EnimdaError, InvalidParameterError
from enimda.models import Borders, ScanOptions

__all__ = [
    "__version__",
    "detect_borders",
    "detect_borders_array",
    "Borders",
    "ScanOptions",
    "EnimdaError",
    "InvalidParameterError",
    "DecodeError",
]
