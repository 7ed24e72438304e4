"""Chromaslice: HSV/RGB/hex color math, color code text and gradient rasters for color pickers."""

__version__ = "0.1.0"

from .colors import ColorBase, RgbColor, HsvColor, HexColor, RGB, HSV, HEX, get_color_class
from .conversions import (
    rgb_to_hsv,
    hsv_to_rgb,
    rgb_to_hex,
    hex_to_rgb,
    hsv_to_hex,
    hex_to_hsv,
    rgb_to_argb,
    hsv_to_argb,
    argb_to_rgb,
    np_rgb_to_hsv,
    np_hsv_to_rgb,
    sextant_of,
    convert,
)
from .codec import (
    partial_validate,
    is_valid,
    is_valid_code,
    commit,
    from_string,
    to_string,
    paste,
    copy_text,
)
from .gradients import GradientRasterizer, pack_argb, unpack_argb, to_rgb_image
from .exceptions import (
    ChromaSliceError,
    OutOfRangeError,
    MalformedColorCodeError,
    MalformedHexError,
    InvalidDimensionError,
)
from .types import ColorFormat, ColorType

__all__ = [
    "__version__",
    # colors
    "ColorBase",
    "RgbColor",
    "HsvColor",
    "HexColor",
    "RGB",
    "HSV",
    "HEX",
    "get_color_class",
    # conversions
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hex",
    "hex_to_rgb",
    "hsv_to_hex",
    "hex_to_hsv",
    "rgb_to_argb",
    "hsv_to_argb",
    "argb_to_rgb",
    "np_rgb_to_hsv",
    "np_hsv_to_rgb",
    "sextant_of",
    "convert",
    # codec
    "partial_validate",
    "is_valid",
    "is_valid_code",
    "commit",
    "from_string",
    "to_string",
    "paste",
    "copy_text",
    # gradients
    "GradientRasterizer",
    "pack_argb",
    "unpack_argb",
    "to_rgb_image",
    # errors
    "ChromaSliceError",
    "OutOfRangeError",
    "MalformedColorCodeError",
    "MalformedHexError",
    "InvalidDimensionError",
    # types
    "ColorFormat",
    "ColorType",
]
