import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HsvTuple
from ..types.format_type import HUE_360, SEXTANT_WIDTH, MAX_CHANNEL, MAX_PERCENT
from .domain import check_rgb, np_check_rgb


def _hue(r: float, g: float, b: float, c_max: float, delta: float) -> float:
    if delta == 0:
        return 0.0
    if c_max == r:
        return SEXTANT_WIDTH * (((g - b) / delta) % 6)
    if c_max == g:
        return SEXTANT_WIDTH * ((b - r) / delta + 2)
    return SEXTANT_WIDTH * ((r - g) / delta + 4)


def rgb_to_hsv(r: float, g: float, b: float) -> HsvTuple:
    """
    Convert RGB to HSV.

    Input:
        r, g, b ∈ [0, 255]

    Output:
        h ∈ [0, 360)
        s ∈ [0, 100]
        v ∈ [0, 100]
    """
    check_rgb(r, g, b)

    r_unit = r / MAX_CHANNEL
    g_unit = g / MAX_CHANNEL
    b_unit = b / MAX_CHANNEL

    c_max = max(r_unit, g_unit, b_unit)
    c_min = min(r_unit, g_unit, b_unit)
    delta = c_max - c_min

    h = _hue(r_unit, g_unit, b_unit, c_max, delta)
    if h < 0:
        h += HUE_360
    elif h >= HUE_360:
        h -= HUE_360
    s = 0.0 if c_max == 0 else delta / c_max

    return h, s * MAX_PERCENT, c_max * MAX_PERCENT


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB to HSV.

    Args:
        r, g, b: array-like or scalar, channels in [0, 255]

    Returns:
        hsv: float array of shape (..., 3): (hue [0,360), saturation [0,100], value [0,100])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    np_check_rgb(r, g, b)

    r = r / MAX_CHANNEL
    g = g / MAX_CHANNEL
    b = b / MAX_CHANNEL

    c_max = np.maximum(np.maximum(r, g), b)
    c_min = np.minimum(np.minimum(r, g), b)
    delta = c_max - c_min

    # Hue; guarded division, masked afterwards
    safe_delta = np.where(delta == 0, 1.0, delta)
    h_r = SEXTANT_WIDTH * np.mod((g - b) / safe_delta, 6)
    h_g = SEXTANT_WIDTH * ((b - r) / safe_delta + 2)
    h_b = SEXTANT_WIDTH * ((r - g) / safe_delta + 4)

    h = np.where(c_max == r, h_r, np.where(c_max == g, h_g, h_b))
    h = np.where(delta == 0, 0.0, h)
    h = np.where(h < 0, h + HUE_360, h)
    h = np.where(h >= HUE_360, h - HUE_360, h)

    lit = c_max > 0
    s = np.where(lit, delta / np.where(lit, c_max, 1.0), 0.0)

    return np.stack([h, s * MAX_PERCENT, c_max * MAX_PERCENT], axis=-1)
