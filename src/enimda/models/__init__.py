"""
Data Models
===========

Models:
    - Borders: Four-sided border report (output contract)
    - ImageInfo: Decoded image metadata
    - ScanOptions: Validated detection tunables
"""

from enimda.models.borders import Borders
from enimda.models.image import ImageInfo
from enimda.models.options import ScanOptions

__all__ = [
    "Borders",
    "ImageInfo",
    "ScanOptions",
]
