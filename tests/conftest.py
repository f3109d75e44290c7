"""
Test Configuration
==================

Pytest fixtures and test configuration for ENIMDA.

Synthetic images are built with numpy; encoded files are written with
Pillow into the per-test tmp_path.
"""

import io
import random

import numpy as np
import pytest
from PIL import Image


WHITE = 255


@pytest.fixture
def rng():
    """Seeded generator for reproducible sampling."""
    return random.Random(1234)


@pytest.fixture
def make_noise():
    """Factory for seeded uint8 noise of a given shape."""
    def _make(shape, seed=7):
        return np.random.default_rng(seed).integers(0, 256, size=shape, dtype=np.uint8)
    return _make


@pytest.fixture
def make_margin_image(make_noise):
    """
    Factory for a noisy luma image with white margins.
    
    Example:
        image = make_margin_image(top=20, left=10)
    """
    def _make(width=100, height=100, top=0, right=0, bottom=0, left=0, seed=7):
        image = make_noise((height, width), seed=seed)
        image[:top, :] = WHITE
        image[:, :left] = WHITE
        if bottom:
            image[height - bottom:, :] = WHITE
        if right:
            image[:, width - right:] = WHITE
        return image
    return _make


@pytest.fixture
def solid_gray():
    """100x100 image of a single luma value."""
    return np.full((100, 100), 128, dtype=np.uint8)


@pytest.fixture
def top_margin_image(make_margin_image):
    """100x100 image, white for rows 0-19 and noise for rows 20-99."""
    return make_margin_image(top=20)


@pytest.fixture
def block_margin_image():
    """
    200x200 image with a 40-row white top margin over 2x2-block noise.
    
    Halving it with area interpolation is lossless, so scans at full and
    half resolution see the same content.
    """
    blocks = np.random.default_rng(11).integers(0, 256, size=(80, 100), dtype=np.uint8)
    content = np.repeat(np.repeat(blocks, 2, axis=0), 2, axis=1)
    image = np.full((200, 200), WHITE, dtype=np.uint8)
    image[40:, :] = content
    return image


@pytest.fixture
def encode_png():
    """Factory encoding a luma or RGB array as PNG bytes."""
    def _encode(array):
        buffer = io.BytesIO()
        Image.fromarray(array).save(buffer, format="PNG")
        return buffer.getvalue()
    return _encode


@pytest.fixture
def animated_gif_path(tmp_path, make_margin_image):
    """Two-frame GIF: top margin of 20 rows, then top margin of 10 rows."""
    first = Image.fromarray(make_margin_image(top=20, seed=3))
    second = Image.fromarray(make_margin_image(top=10, seed=5))
    
    path = tmp_path / "animated.gif"
    first.save(
        path,
        format="GIF",
        save_all=True,
        append_images=[second],
        duration=100,
        loop=0,
    )
    return path
