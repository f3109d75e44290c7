"""
Detector Tests
==============

End-to-end detection through the Pillow decoding boundary.
"""

import io

import numpy as np
import pytest

from enimda import (
    Borders,
    DecodeError,
    InvalidParameterError,
    detect_borders,
    detect_borders_array,
)
from enimda.decoding import open_image


class TestDetectBordersArray:
    """Detection on in-memory images."""
    
    def test_solid_gray(self, solid_gray):
        borders = detect_borders_array(solid_gray)
        
        assert borders == Borders(top=0, right=0, bottom=0, left=0)
    
    def test_top_margin(self, top_margin_image):
        borders = detect_borders_array(top_margin_image)
        
        assert 19 <= borders.top <= 22
        assert (borders.right, borders.bottom, borders.left) == (0, 0, 0)
    
    def test_deterministic_without_sampling(self, make_margin_image):
        image = make_margin_image(top=12, left=25, bottom=8, seed=4)
        
        results = {detect_borders_array(image).as_tuple() for _ in range(3)}
        
        assert len(results) == 1
    
    def test_frame_sequence(self, make_margin_image):
        frames = [make_margin_image(top=20, seed=1), make_margin_image(top=10, seed=2)]
        
        borders = detect_borders_array(frames)
        
        assert 9 <= borders.top <= 12
    
    def test_invalid_depth(self, top_margin_image):
        with pytest.raises(InvalidParameterError):
            detect_borders_array(top_margin_image, depth=1.5)


class TestDetectBorders:
    """Detection on encoded images."""
    
    def test_png_path(self, tmp_path, top_margin_image, encode_png):
        path = tmp_path / "margin.png"
        path.write_bytes(encode_png(top_margin_image))
        
        borders = detect_borders(path)
        
        assert 19 <= borders.top <= 22
        assert (borders.right, borders.bottom, borders.left) == (0, 0, 0)
    
    def test_string_path(self, tmp_path, solid_gray, encode_png):
        path = tmp_path / "gray.png"
        path.write_bytes(encode_png(solid_gray))
        
        assert detect_borders(str(path)).as_tuple() == (0, 0, 0, 0)
    
    def test_png_bytes_rgb(self, top_margin_image, encode_png):
        rgb = np.stack([top_margin_image] * 3, axis=-1)
        
        borders = detect_borders(encode_png(rgb))
        
        assert 19 <= borders.top <= 22
    
    def test_file_object(self, top_margin_image, encode_png):
        borders = detect_borders(io.BytesIO(encode_png(top_margin_image)))
        
        assert 19 <= borders.top <= 22
    
    def test_resize_reports_original_pixels(self, block_margin_image, encode_png):
        data = encode_png(block_margin_image)
        
        full = detect_borders(data)
        halved = detect_borders(data, size=100)
        
        for full_side, halved_side in zip(full.as_tuple(), halved.as_tuple()):
            assert abs(full_side - halved_side) <= 2
    
    def test_animated_gif_takes_minimum(self, animated_gif_path):
        """Frames with 20 and 10 row margins report the shallower one."""
        borders = detect_borders(animated_gif_path)
        
        assert 9 <= borders.top <= 12
    
    def test_animated_gif_frame_limit(self, animated_gif_path, rng):
        borders = detect_borders(animated_gif_path, frames=1, rng=rng)
        
        assert 9 <= borders.top <= 22
    
    def test_invalid_depth(self, tmp_path, solid_gray, encode_png):
        path = tmp_path / "gray.png"
        path.write_bytes(encode_png(solid_gray))
        
        with pytest.raises(InvalidParameterError):
            detect_borders(path, depth=1.5)
    
    def test_invalid_threshold(self, solid_gray, encode_png):
        with pytest.raises(InvalidParameterError):
            detect_borders(encode_png(solid_gray), threshold=0.0)
    
    def test_undecodable_bytes(self):
        with pytest.raises(DecodeError):
            detect_borders(b"definitely not an image")
    
    def test_missing_file_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            detect_borders(tmp_path / "missing.png")
    
    def test_truncated_animation_aborts(self, tmp_path, animated_gif_path):
        """A broken frame fails the whole request; no partial report."""
        data = animated_gif_path.read_bytes()
        path = tmp_path / "truncated.gif"
        path.write_bytes(data[:-200])
        
        with pytest.raises(DecodeError):
            detect_borders(path)


class TestDecoder:
    """Pillow decoding boundary."""
    
    def test_static_info(self, top_margin_image, encode_png):
        with open_image(encode_png(top_margin_image)) as image:
            assert image.info.format == "PNG"
            assert image.info.width == 100
            assert image.info.height == 100
            assert image.frame_count == 1
            assert not image.info.is_animated
    
    def test_animated_info(self, animated_gif_path):
        with open_image(animated_gif_path) as image:
            assert image.info.format == "GIF"
            assert image.frame_count == 2
            assert image.info.is_animated
    
    def test_frames_are_rgb(self, animated_gif_path):
        with open_image(animated_gif_path) as image:
            frames = list(image.frames())
        
        assert len(frames) == 2
        for frame in frames:
            assert frame.shape == (100, 100, 3)
            assert frame.dtype == np.uint8
    
    def test_frames_composited_on_full_canvas(self, animated_gif_path):
        """The second frame keeps its own white margin of 10 rows."""
        with open_image(animated_gif_path) as image:
            second = list(image.frames({1}))[0]
        
        assert np.all(second[:10] == 255)
    
    def test_selected_frames_only(self, animated_gif_path):
        with open_image(animated_gif_path) as image:
            assert len(list(image.frames({0}))) == 1
