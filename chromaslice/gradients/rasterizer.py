"""
Saturation x value slices of the HSV solid, and the hue spectrum row.

Pixel (x, y) of a ``width`` x ``height`` slice shows

    s = x / width * 100
    v = (height - y) / height * 100

so saturation grows left to right and value grows bottom to top: the top
row is full value and the bottom-left pixel is the darkest, least
saturated one.
"""
from __future__ import annotations

import logging
from enum import Enum
from numbers import Integral, Real
from typing import Optional, Tuple

import numpy as np

from ..colors import HsvColor, RgbColor
from ..config import DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_HUE, DEFAULT_SATURATION, DEFAULT_VALUE
from ..conversions import np_hsv_to_rgb
from ..conversions.domain import check_channel
from ..exceptions import InvalidDimensionError, OutOfRangeError
from ..types.color_types import PixelBuffer
from ..types.format_type import HUE_360, MAX_PERCENT
from .buffers import pack_argb

logger = logging.getLogger(__name__)


class RasterState(Enum):
    CLEAN = "clean"  # buffers match the current hue and dimensions
    DIRTY = "dirty"  # a mutator fired since the last raster


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
        raise InvalidDimensionError(name, value)
    return int(value)


def _check_number(name: str, value, maximum: float) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise OutOfRangeError(name, value, 0, maximum)
    check_channel(name, value, maximum)
    return float(value)


def render_slice(width: int, height: int, hue: float) -> PixelBuffer:
    """
    Rasterize one saturation x value slice.

    Returns:
        uint32 ARGB buffer of length ``width * height``, row-major
    """
    xs = np.arange(width, dtype=float)
    ys = np.arange(height, dtype=float)
    saturation = xs / width * MAX_PERCENT
    value = (height - ys) / height * MAX_PERCENT

    rgb = np_hsv_to_rgb(hue, saturation[np.newaxis, :], value[:, np.newaxis])
    return pack_argb(rgb)


def render_spectrum(width: int, saturation: float, value: float) -> PixelBuffer:
    """Rasterize a one-row hue spectrum, ``hue = x / width * 360``."""
    xs = np.arange(width, dtype=float)
    hue = xs / width * HUE_360
    return pack_argb(np_hsv_to_rgb(hue, saturation, value))


class GradientRasterizer:
    """
    Holds the dimensions and the fixed hue/saturation/value of a gradient
    surface and produces its ARGB buffers.

    Every mutator marks the rasterizer dirty; buffers are only recomputed when
    read, so a resize drag that sets the width many times costs one raster.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        hue: float = DEFAULT_HUE,
        saturation: float = DEFAULT_SATURATION,
        value: float = DEFAULT_VALUE,
    ):
        self._width = _check_dimension("width", width)
        self._height = _check_dimension("height", height)
        self._hue = _check_number("hue", hue, HUE_360)
        self._saturation = _check_number("saturation", saturation, MAX_PERCENT)
        self._value = _check_number("value", value, MAX_PERCENT)

        self._slice: Optional[PixelBuffer] = None
        self._spectrum: Optional[PixelBuffer] = None
        self._state = RasterState.DIRTY

    # ------------------ MUTABLE STATE ------------------
    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, width: int) -> None:
        self._width = _check_dimension("width", width)
        self._invalidate()

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, height: int) -> None:
        self._height = _check_dimension("height", height)
        self._invalidate()

    @property
    def hue(self) -> float:
        return self._hue

    @hue.setter
    def hue(self, hue: float) -> None:
        self._hue = _check_number("hue", hue, HUE_360)
        self._invalidate()

    @property
    def saturation(self) -> float:
        return self._saturation

    @saturation.setter
    def saturation(self, saturation: float) -> None:
        self._saturation = _check_number("saturation", saturation, MAX_PERCENT)
        self._invalidate()

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        self._value = _check_number("value", value, MAX_PERCENT)
        self._invalidate()

    def set_width(self, width: int) -> None:
        self.width = width

    def set_height(self, height: int) -> None:
        self.height = height

    def set_hue(self, hue: float) -> None:
        self.hue = hue

    def set_saturation(self, saturation: float) -> None:
        self.saturation = saturation

    def set_value(self, value: float) -> None:
        self.value = value

    def resize(self, width: int, height: int) -> None:
        """Set both dimensions; nothing changes if either one is invalid."""
        width = _check_dimension("width", width)
        height = _check_dimension("height", height)
        self._width, self._height = width, height
        self._invalidate()

    def _invalidate(self) -> None:
        self._state = RasterState.DIRTY

    @property
    def is_dirty(self) -> bool:
        return self._state is RasterState.DIRTY

    # ------------------ BUFFERS ------------------
    def regenerate(self) -> PixelBuffer:
        """Recompute every buffer from the current state and return the slice."""
        logger.debug("Rasterizing %dx%d slice at hue %s", self._width, self._height, self._hue)
        self._slice = render_slice(self._width, self._height, self._hue)
        self._spectrum = render_spectrum(self._width, self._saturation, self._value)
        # owned by the rasterizer; callers get read-only views
        self._slice.setflags(write=False)
        self._spectrum.setflags(write=False)
        self._state = RasterState.CLEAN
        return self._slice

    @property
    def buffer(self) -> PixelBuffer:
        """The current slice; reading it while dirty recomputes it."""
        if self._state is RasterState.DIRTY:
            return self.regenerate()
        return self._slice

    def slice_of(self, hue: Optional[float] = None) -> PixelBuffer:
        """
        Saturation x value slice at ``hue`` (the current hue when omitted).

        Passing a hue sets it, exactly like assigning ``hue``.
        """
        if hue is not None:
            self.hue = hue
        return self.buffer

    def spectrum(self, width: Optional[int] = None) -> PixelBuffer:
        """
        One-row hue spectrum at the current saturation and value.

        Args:
            width: Number of pixels; defaults to the rasterizer's width. A
                different width is rendered on the fly and not cached.
        """
        if width is not None and _check_dimension("width", width) != self._width:
            return render_spectrum(width, self._saturation, self._value)
        if self._state is RasterState.DIRTY:
            self.regenerate()
        return self._spectrum

    # ------------------ POINTER MAPPING ------------------
    def color_at(self, x: float, y: float) -> HsvColor:
        """
        Color shown under a pointer at (x, y).

        Coordinates are continuous within ``[0, width] x [0, height]``; at a
        pixel's integer coordinates the result is the color of that pixel.
        """
        check_channel("x", x, self._width)
        check_channel("y", y, self._height)
        saturation = x / self._width * MAX_PERCENT
        value = (self._height - y) / self._height * MAX_PERCENT
        return HsvColor((self._hue, saturation, value))

    def rgb_at(self, x: float, y: float) -> RgbColor:
        return self.color_at(x, y).to_rgb()

    def pixel_at(self, x: int, y: int) -> int:
        """Packed ARGB value of pixel (x, y) of the current slice."""
        for name, coordinate in (("x", x), ("y", y)):
            if isinstance(coordinate, bool) or not isinstance(coordinate, Integral):
                raise TypeError(f"Pixel {name} must be an integer, got {coordinate!r}")
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self._width}x{self._height} slice")
        return int(self.buffer[y * self._width + x])

    def position_of(self, saturation: float, value: float) -> Tuple[float, float]:
        """Pointer coordinates at which the slice shows ``saturation`` and ``value``."""
        saturation = _check_number("saturation", saturation, MAX_PERCENT)
        value = _check_number("value", value, MAX_PERCENT)
        x = saturation / MAX_PERCENT * self._width
        y = (MAX_PERCENT - value) / MAX_PERCENT * self._height
        return x, y

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(width={self._width}, height={self._height}, "
            f"hue={self._hue}, saturation={self._saturation}, value={self._value})"
        )
