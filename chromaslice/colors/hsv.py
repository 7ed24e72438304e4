from typing import ClassVar, Tuple
from ..types.format_type import ColorFormat
from ..conversions import hsv_to_rgb, hsv_to_hex, hsv_to_argb, sextant_of
from .color_base import ColorBase


class HsvColor(ColorBase):
    """
    Hue in [0, 360], saturation and value in [0, 100], stored as floats.

    360 is kept as given; it shows the same color as 0 but a hue slider
    positioned at its end still reads 360.
    """
    format: ClassVar[ColorFormat] = ColorFormat.HSV
    channel_names: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "value")

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def value(self) -> float:
        return self._value[2]

    @property
    def sextant(self) -> int:
        return sextant_of(self.hue)

    @property
    def argb(self) -> int:
        return hsv_to_argb(*self._value)

    def to_rgb(self):
        from .rgb import RgbColor
        return RgbColor(hsv_to_rgb(*self._value))

    def to_hex(self):
        from .hex import HexColor
        return HexColor(hsv_to_hex(*self._value))


HSV = HsvColor
