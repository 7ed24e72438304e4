"""
Chromaslice Gradients
=====================

ARGB rasters for color selection surfaces.

    GradientRasterizer(width, height, hue, saturation, value)
        slice_of(hue=None)   saturation x value slice at one hue
        spectrum(width=None) one-row hue spectrum
        color_at(x, y), rgb_at(x, y), pixel_at(x, y), position_of(s, v)

Buffers are flat uint32 arrays, row-major, every pixel fully opaque
(``0xFF000000 | r << 16 | g << 8 | b``).

to_image(buffer, width, height) wraps a buffer in a PIL image; the
example_* functions render and save sample surfaces.
"""

from .buffers import pack_argb, unpack_argb, to_rgb_image, to_image
from .rasterizer import GradientRasterizer, RasterState, render_slice, render_spectrum
from .examples import example_slice, example_spectrum

__all__ = [
    'GradientRasterizer',
    'RasterState',
    'render_slice',
    'render_spectrum',
    'pack_argb',
    'unpack_argb',
    'to_rgb_image',
    'to_image',
    'example_slice',
    'example_spectrum',
]
