"""Packed integer and hexadecimal color codes."""
import re
import numpy as np
from numpy import ndarray as NDArray

from ..config import OPAQUE_ALPHA
from ..exceptions import MalformedHexError
from ..types.color_types import RgbTuple, HsvTuple
from .domain import check_rgb, np_check_rgb
from .to_hsv import rgb_to_hsv
from .to_rgb import hsv_to_rgb

HEX_DIGITS = re.compile(r"[0-9a-fA-F]{6}")


def rgb_to_rgb_code(r: int, g: int, b: int) -> int:
    """Pack RGB into a 24-bit ``0xRRGGBB`` integer."""
    check_rgb(r, g, b)
    return (int(r) << 16) | (int(g) << 8) | int(b)


def rgb_to_argb(r: int, g: int, b: int) -> int:
    """Pack RGB into an opaque 32-bit ``0xAARRGGBB`` integer."""
    return (OPAQUE_ALPHA << 24) | rgb_to_rgb_code(r, g, b)


def argb_to_rgb(argb: int) -> RgbTuple:
    """Unpack the color channels of a 24 or 32-bit packed color, alpha is dropped."""
    return (argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format RGB as ``#RRGGBB``, uppercase, zero padded."""
    return f"#{rgb_to_rgb_code(r, g, b):06X}"


def strip_hex(hex_code: str) -> str:
    """Remove one optional leading '#' and check exactly 6 hex digits remain."""
    digits = hex_code[1:] if hex_code.startswith("#") else hex_code
    if not HEX_DIGITS.fullmatch(digits):
        raise MalformedHexError(hex_code)
    return digits


def hex_to_rgb(hex_code: str) -> RgbTuple:
    """Decode ``#RRGGBB`` or ``RRGGBB`` (any case) into RGB."""
    digits = strip_hex(hex_code)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def hsv_to_hex(h: float, s: float, v: float) -> str:
    return rgb_to_hex(*hsv_to_rgb(h, s, v))


def hex_to_hsv(hex_code: str) -> HsvTuple:
    return rgb_to_hsv(*hex_to_rgb(hex_code))


def hsv_to_rgb_code(h: float, s: float, v: float) -> int:
    return rgb_to_rgb_code(*hsv_to_rgb(h, s, v))


def hsv_to_argb(h: float, s: float, v: float) -> int:
    return rgb_to_argb(*hsv_to_rgb(h, s, v))


def np_rgb_to_argb(rgb: NDArray) -> NDArray:
    """
    Pack an integer RGB array of shape (..., 3) into opaque ARGB.

    Returns:
        uint32 array of shape (...)
    """
    rgb = np.asarray(rgb)
    if rgb.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {rgb.shape}")
    np_check_rgb(rgb[..., 0], rgb[..., 1], rgb[..., 2])

    channels = rgb.astype(np.uint32)
    return (
        np.uint32(OPAQUE_ALPHA << 24)
        | (channels[..., 0] << np.uint32(16))
        | (channels[..., 1] << np.uint32(8))
        | channels[..., 2]
    )


def np_argb_to_rgb(argb: NDArray) -> NDArray:
    """Unpack a packed ARGB array of shape (...) into uint8 RGB of shape (..., 3)."""
    argb = np.asarray(argb, dtype=np.uint32)
    return np.stack(
        [(argb >> np.uint32(16)) & 0xFF, (argb >> np.uint32(8)) & 0xFF, argb & 0xFF],
        axis=-1,
    ).astype(np.uint8)
