"""
Image Decoder
=============

Pillow-backed decoding of image files into numpy frames.

Design Rules:
    - This is the ONLY place in the codebase that decodes images
    - I/O errors from opening a path propagate unchanged
    - Every codec failure is re-raised as DecodeError (fail fast, no
      partial results)
    - Animation frames are composited onto the full canvas by Pillow
      (disposal and blending included) before they are yielded

Supported containers are whatever the installed Pillow can read: static
formats (PNG, JPEG, BMP, ...) and multi-frame formats (GIF, APNG, WebP,
multi-page TIFF).
"""

import io
import logging
import os
from contextlib import ExitStack, contextmanager
from typing import BinaryIO, Iterator, Optional, Set, Union

import numpy as np
from PIL import Image, ImageSequence

from enimda.errors import DecodeError
from enimda.models.image import ImageInfo


logger = logging.getLogger(__name__)


ImageSourceType = Union[str, "os.PathLike[str]", bytes, bytearray, BinaryIO]


def read_info(image: Image.Image) -> ImageInfo:
    """
    Read geometry, format tag and frame count.
    
    Raises:
        DecodeError: If the container cannot report its frames
    """
    try:
        frame_count = getattr(image, "n_frames", 1)
        return ImageInfo(
            width=image.width,
            height=image.height,
            format=image.format or "UNKNOWN",
            frame_count=frame_count,
        )
    except Exception as e:
        raise DecodeError(f"Failed to read image info: {e}") from e


class DecodedImage:
    """
    Frame source over an opened Pillow image.
    
    Attributes:
        info: Image metadata read at construction time
    """
    
    def __init__(self, image: Image.Image) -> None:
        self._image = image
        self.info = read_info(image)
    
    @property
    def frame_count(self) -> int:
        return self.info.frame_count
    
    def frames(self, indices: Optional[Set[int]] = None) -> Iterator[np.ndarray]:
        """
        Iterate composited frames as RGB arrays (H, W, 3), dtype=uint8.
        
        Every frame is visited so compositing stays correct, but only the
        frames in `indices` are converted and yielded.
        
        Args:
            indices: Frame indices to yield (None = every frame)
            
        Raises:
            DecodeError: If seeking or loading any frame fails
        """
        index = -1
        try:
            for index, frame in enumerate(ImageSequence.Iterator(self._image)):
                if indices is not None and index not in indices:
                    continue
                rgb = np.array(frame.convert("RGB"))
                if rgb.ndim != 3 or rgb.shape[2] != 3:
                    raise DecodeError(f"Invalid frame shape at index {index}: {rgb.shape}")
                yield rgb
        except DecodeError:
            raise
        except Exception as e:
            raise DecodeError(f"Failed to decode frame {index + 1}: {e}") from e


@contextmanager
def open_image(source: ImageSourceType) -> Iterator[DecodedImage]:
    """
    Open an image for frame iteration.
    
    Args:
        source: Filesystem path, raw encoded bytes or a binary file object
        
    Yields:
        DecodedImage ready for frame iteration
        
    Raises:
        OSError: If a path cannot be opened (not wrapped)
        DecodeError: If the data is not a readable image
    """
    with ExitStack() as stack:
        if isinstance(source, (bytes, bytearray)):
            fp = io.BytesIO(source)
        elif isinstance(source, (str, os.PathLike)):
            fp = stack.enter_context(open(source, "rb"))
        else:
            fp = source
        
        try:
            image = Image.open(fp)
        except Exception as e:
            raise DecodeError(f"Cannot identify image: {e}") from e
        
        stack.enter_context(image)
        decoded = DecodedImage(image)
        
        logger.debug(
            f"Opened {decoded.info.format} image {decoded.info.width}x{decoded.info.height}, "
            f"frames={decoded.info.frame_count}"
        )
        
        yield decoded
