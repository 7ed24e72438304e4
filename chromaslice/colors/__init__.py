"""
Chromaslice Color Classes
=========================

Immutable value types for the three representations a color picker shows.

Features
--------
- Frozen after initialization (assigning any attribute raises AttributeError)
- Channels are range-checked, never clamped: out-of-domain input raises
  OutOfRangeError
- Construction from another color converts automatically

Usage
-----
>>> from chromaslice.colors import RgbColor, HsvColor, HexColor
>>> red = RgbColor((255, 0, 0))
>>> HsvColor(red).channels
(0.0, 100.0, 100.0)
>>> HexColor(red).code
'#FF0000'
>>> HexColor("00ff80").to_rgb()
RgbColor((0, 255, 128))

Color Classes
-------------
    - RgbColor: red, green, blue ints in [0, 255]
    - HsvColor: hue in [0, 360], saturation and value in [0, 100]
    - HexColor: canonical uppercase ``#RRGGBB``
"""

from ..types.format_type import ColorFormat
from .color_base import ColorBase, build_registry
from .rgb import RgbColor, RGB
from .hsv import HsvColor, HSV
from .hex import HexColor, HEX

format_to_class = build_registry(RgbColor, HsvColor, HexColor)


def get_color_class(color_format: ColorFormat | str) -> type[ColorBase]:
    color_class = format_to_class.get(ColorFormat(color_format))
    if color_class is None:
        raise ValueError(f"Unsupported color format: {color_format}")
    return color_class


__all__ = [
    'ColorBase',
    'RgbColor',
    'HsvColor',
    'HexColor',
    'RGB',
    'HSV',
    'HEX',
    'format_to_class',
    'get_color_class',
]
