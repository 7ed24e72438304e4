"""
Chromaslice Color Space Conversions
===================================

Exact conversions between RGB (0-255 ints), HSV (hue 0-360, saturation and
value 0-100) and 6-digit hex codes, with scalar functions for single colors
and ``np_`` twins for whole rasters.

Conversion Functions
--------------------

RGB → HSV:
    rgb_to_hsv(r, g, b)
    np_rgb_to_hsv(r, g, b)

HSV → RGB:
    hsv_to_rgb(h, s, v)
        Sextant-table conversion, each channel rounded up (ceil)
    np_hsv_to_rgb(h, s, v)
        Vectorized, bit-identical to hsv_to_rgb

Hex and packed codes:
    rgb_to_hex, hex_to_rgb, hsv_to_hex, hex_to_hsv
    rgb_to_rgb_code, rgb_to_argb, hsv_to_rgb_code, hsv_to_argb, argb_to_rgb
    np_rgb_to_argb, np_argb_to_rgb

Sextants:
    sextant_of(hue)
        Wraps any hue into [0, 360) and returns its 60° segment index
    apply_role(role, h, dh, minimum, maximum, slope)

High-Level API
--------------
    convert(color, from_format, to_format)

Domain
------
Converters do not clamp their inputs. Hue outside [0, 360], saturation or
value outside [0, 100] and RGB channels outside [0, 255] raise
OutOfRangeError; validating typed input is the codec's job.

Examples
--------
>>> from chromaslice.conversions import rgb_to_hsv, hsv_to_rgb, rgb_to_hex
>>> rgb_to_hsv(0, 255, 0)
(120.0, 100.0, 100.0)
>>> hsv_to_rgb(240, 100, 100)
(0, 0, 255)
>>> rgb_to_hex(255, 0, 0)
'#FF0000'
"""

# RGB → HSV
from .to_hsv import rgb_to_hsv, np_rgb_to_hsv

# HSV → RGB
from .to_rgb import hsv_to_rgb, np_hsv_to_rgb

# Sextants
from .sextants import SEXTANT_ROLES, sextant_of, np_sextant_of, apply_role

# Hex and packed codes
from .codes import (
    rgb_to_hex,
    hex_to_rgb,
    hsv_to_hex,
    hex_to_hsv,
    strip_hex,
    rgb_to_rgb_code,
    rgb_to_argb,
    argb_to_rgb,
    hsv_to_rgb_code,
    hsv_to_argb,
    np_rgb_to_argb,
    np_argb_to_rgb,
)

# High-level API
from .wrapper import convert

# Types and enums
from ..types.format_type import ColorFormat, Role

__all__ = [
    # RGB → HSV
    'rgb_to_hsv',
    'np_rgb_to_hsv',

    # HSV → RGB
    'hsv_to_rgb',
    'np_hsv_to_rgb',

    # Sextants
    'SEXTANT_ROLES',
    'sextant_of',
    'np_sextant_of',
    'apply_role',

    # Hex and packed codes
    'rgb_to_hex',
    'hex_to_rgb',
    'hsv_to_hex',
    'hex_to_hsv',
    'strip_hex',
    'rgb_to_rgb_code',
    'rgb_to_argb',
    'argb_to_rgb',
    'hsv_to_rgb_code',
    'hsv_to_argb',
    'np_rgb_to_argb',
    'np_argb_to_rgb',

    # High-level API
    'convert',

    # Types
    'ColorFormat',
    'Role',
]
