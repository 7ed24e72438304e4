"""Flat ARGB pixel buffers and their image views."""
from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray

from ..conversions import np_rgb_to_argb, np_argb_to_rgb
from ..types.color_types import PixelBuffer


def pack_argb(rgb: NDArray) -> PixelBuffer:
    """
    Pack an integer RGB array of shape (..., 3) into a flat, row-major,
    fully opaque ARGB buffer.
    """
    return np_rgb_to_argb(rgb).reshape(-1)


def unpack_argb(buffer: PixelBuffer) -> NDArray:
    """Unpack a flat ARGB buffer into a uint8 array of shape (n, 3), alpha dropped."""
    return np_argb_to_rgb(np.asarray(buffer).reshape(-1))


def to_rgb_image(buffer: PixelBuffer, width: int, height: int) -> NDArray:
    """
    View a flat ARGB buffer as an image.

    Args:
        buffer: row-major ARGB pixels, pixel (x, y) at index ``y * width + x``
        width: Number of columns
        height: Number of rows

    Returns:
        uint8 array of shape (height, width, 3)
    """
    buffer = np.asarray(buffer)
    if buffer.size != width * height:
        raise ValueError(f"Buffer of {buffer.size} pixels does not fit a {width}x{height} image")
    return np_argb_to_rgb(buffer.reshape(height, width))


def to_image(buffer: PixelBuffer, width: int, height: int):
    """Build a PIL RGB image from a flat ARGB buffer."""
    from PIL import Image

    return Image.fromarray(to_rgb_image(buffer, width, height))
