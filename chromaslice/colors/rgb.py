from typing import ClassVar, Tuple
from ..types.format_type import ColorFormat
from ..conversions import rgb_to_hsv, rgb_to_hex, rgb_to_argb
from .color_base import ColorBase


class RgbColor(ColorBase):
    """Three integer channels in [0, 255]."""
    format: ClassVar[ColorFormat] = ColorFormat.RGB
    channel_names: ClassVar[Tuple[str, ...]] = ("red", "green", "blue")

    @property
    def red(self) -> int:
        return self._value[0]

    @property
    def green(self) -> int:
        return self._value[1]

    @property
    def blue(self) -> int:
        return self._value[2]

    @property
    def argb(self) -> int:
        return rgb_to_argb(*self._value)

    def to_hsv(self):
        from .hsv import HsvColor
        return HsvColor(rgb_to_hsv(*self._value))

    def to_hex(self):
        from .hex import HexColor
        return HexColor(rgb_to_hex(*self._value))


RGB = RgbColor
