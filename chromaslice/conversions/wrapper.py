from typing import Callable, Dict, Tuple

from ..types.color_types import ColorElement
from ..types.format_type import ColorFormat
from .to_rgb import hsv_to_rgb
from .to_hsv import rgb_to_hsv
from .codes import rgb_to_hex, hex_to_rgb, hsv_to_hex, hex_to_hsv

CONVERT: Dict[Tuple[ColorFormat, ColorFormat], Callable[[ColorElement], ColorElement]] = {
    (ColorFormat.RGB, ColorFormat.HSV): lambda c: rgb_to_hsv(*c),
    (ColorFormat.HSV, ColorFormat.RGB): lambda c: hsv_to_rgb(*c),
    (ColorFormat.RGB, ColorFormat.HEX): lambda c: rgb_to_hex(*c),
    (ColorFormat.HEX, ColorFormat.RGB): hex_to_rgb,
    (ColorFormat.HSV, ColorFormat.HEX): lambda c: hsv_to_hex(*c),
    (ColorFormat.HEX, ColorFormat.HSV): hex_to_hsv,
}


def convert(
    color: ColorElement,
    from_format: ColorFormat | str,
    to_format: ColorFormat | str,
) -> ColorElement:
    """
    Convert a color between the rgb, hsv and hex representations.

    Args:
        color: (r, g, b) ints, (h, s, v) floats, or a hex string
        from_format: Format of ``color``
        to_format: Target format

    Returns:
        Tuple for rgb/hsv targets, ``#RRGGBB`` string for hex
    """
    from_format = ColorFormat(str(from_format).lower()) if not isinstance(from_format, ColorFormat) else from_format
    to_format = ColorFormat(str(to_format).lower()) if not isinstance(to_format, ColorFormat) else to_format

    if from_format == to_format:
        return color  # No conversion needed
    return CONVERT[(from_format, to_format)](color)
