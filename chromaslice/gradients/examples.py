from __future__ import annotations

from .buffers import to_image
from .rasterizer import GradientRasterizer


def example_slice(hue: float = 0.0, output_path=None, show: bool = False):
    """Saturation x value slice at one hue, as a color picker draws it."""
    rasterizer = GradientRasterizer(width=360, height=360, hue=hue)
    img = to_image(rasterizer.buffer, rasterizer.width, rasterizer.height)
    if output_path:
        img.save(output_path)
    if show:
        img.show()
    return img


def example_spectrum(output_path=None, show: bool = False):
    """Hue slider strip: the spectrum row repeated over 24 rows."""
    rasterizer = GradientRasterizer(width=360, height=24)
    row = rasterizer.spectrum()
    strip = row[None, :].repeat(rasterizer.height, axis=0)
    img = to_image(strip, rasterizer.width, rasterizer.height)
    if output_path:
        img.save(output_path)
    if show:
        img.show()
    return img
