"""Domain checks shared by the converters.

Converters assume validated input and never clamp what they are given; an
out-of-domain number is a programming error and fails fast with
OutOfRangeError.
"""
import numpy as np
from numpy import ndarray as NDArray

from ..exceptions import OutOfRangeError
from ..types.format_type import HUE_360, MAX_CHANNEL, MAX_PERCENT


def check_channel(name: str, value: float, maximum: float) -> None:
    if not 0 <= value <= maximum:
        raise OutOfRangeError(name, value, 0, maximum)


def check_rgb(r: float, g: float, b: float) -> None:
    check_channel("red", r, MAX_CHANNEL)
    check_channel("green", g, MAX_CHANNEL)
    check_channel("blue", b, MAX_CHANNEL)


def check_hsv(h: float, s: float, v: float) -> None:
    check_channel("hue", h, HUE_360)
    check_channel("saturation", s, MAX_PERCENT)
    check_channel("value", v, MAX_PERCENT)


def np_check_channel(name: str, values: NDArray, maximum: float) -> None:
    bad = ~((values >= 0) & (values <= maximum))
    if np.any(bad):
        first = values[bad].flat[0]
        raise OutOfRangeError(name, float(first), 0, maximum)


def np_check_rgb(r: NDArray, g: NDArray, b: NDArray) -> None:
    np_check_channel("red", r, MAX_CHANNEL)
    np_check_channel("green", g, MAX_CHANNEL)
    np_check_channel("blue", b, MAX_CHANNEL)


def np_check_hsv(h: NDArray, s: NDArray, v: NDArray) -> None:
    np_check_channel("hue", h, HUE_360)
    np_check_channel("saturation", s, MAX_PERCENT)
    np_check_channel("value", v, MAX_PERCENT)
