"""
Decoding Module
===============

Boundary to the image codec (Pillow). Everything downstream receives
plain numpy arrays.
"""

from enimda.decoding.image_decoder import (
    DecodedImage,
    ImageSourceType,
    open_image,
    read_info,
)

__all__ = [
    "DecodedImage",
    "ImageSourceType",
    "open_image",
    "read_info",
]
