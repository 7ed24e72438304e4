import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RgbTuple
from ..types.format_type import HUE_360, SEXTANT_WIDTH, MAX_CHANNEL, MAX_PERCENT
from .domain import check_hsv, np_check_hsv
from .sextants import SEXTANT_ROLES, SEXTANT_ROLE_ARRAY, apply_role, sextant_of, np_sextant_of


def _to_channel(intensity: float) -> int:
    # ceil, not round: 128.0000000001 displays as 129
    return min(MAX_CHANNEL, max(0, math.ceil(intensity * MAX_CHANNEL)))


def hsv_to_rgb(h: float, s: float, v: float) -> RgbTuple:
    """
    Convert HSV to integer RGB.

    Input:
        h ∈ [0, 360]   (360 gives the same color as 0)
        s ∈ [0, 100]
        v ∈ [0, 100]

    Output:
        (r, g, b) ints in [0, 255], each channel rounded up
    """
    check_hsv(h, s, v)

    adjust_s = s / MAX_PERCENT
    adjust_v = v / MAX_PERCENT

    sextant = sextant_of(h)
    dh = sextant * SEXTANT_WIDTH
    hue = h % HUE_360
    slope = adjust_v * adjust_s / 60.0
    minimum = (1 - adjust_s) * adjust_v

    r, g, b = (
        _to_channel(apply_role(role, hue, dh, minimum, adjust_v, slope))
        for role in SEXTANT_ROLES[sextant]
    )
    return r, g, b


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to integer RGB, bit-identical to hsv_to_rgb.

    Args:
        h: array-like or scalar, hue in [0, 360]
        s: array-like or scalar, saturation in [0, 100]
        v: array-like or scalar, value in [0, 100]

    Returns:
        rgb: int64 array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    np_check_hsv(h, s, v)

    adjust_s = s / MAX_PERCENT
    adjust_v = v / MAX_PERCENT

    sextant = np_sextant_of(h)
    dh = sextant * SEXTANT_WIDTH
    hue = np.mod(h, HUE_360)
    slope = adjust_v * adjust_s / 60.0
    minimum = (1 - adjust_s) * adjust_v
    offset = slope * (hue - dh)

    # Candidate intensities ordered by Role value: MAX, MIN, RISING, FALLING
    candidates = np.stack([adjust_v, minimum, offset + minimum, adjust_v - offset], axis=-1)
    roles = SEXTANT_ROLE_ARRAY[sextant]
    intensities = np.take_along_axis(candidates, roles, axis=-1)

    return np.clip(np.ceil(intensities * MAX_CHANNEL), 0, MAX_CHANNEL).astype(np.int64)
