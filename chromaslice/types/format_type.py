# No dependencies
from __future__ import annotations
from enum import Enum, IntEnum


class ColorFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSV = "hsv"


class ColorType(str, Enum):
    """A single editable field of a color code."""
    HEX = "hex"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    HUE = "hue"
    SATURATION = "saturation"
    VALUE = "value"

    @property
    def unit(self) -> str:
        return field_units[self]

    @property
    def color_format(self) -> ColorFormat:
        return field_formats[self]


class Role(IntEnum):
    """What a channel does while the hue sweeps through one sextant."""
    MAX = 0
    MIN = 1
    RISING = 2
    FALLING = 3


HUE_360 = 360
SEXTANT_WIDTH = 60
MAX_CHANNEL = 255
MAX_PERCENT = 100

field_units = {
    ColorType.HEX: "#",
    ColorType.RED: "r:",
    ColorType.GREEN: "g:",
    ColorType.BLUE: "b:",
    ColorType.HUE: "h:",
    ColorType.SATURATION: "s:",
    ColorType.VALUE: "v:",
}

field_formats = {
    ColorType.HEX: ColorFormat.HEX,
    ColorType.RED: ColorFormat.RGB,
    ColorType.GREEN: ColorFormat.RGB,
    ColorType.BLUE: ColorFormat.RGB,
    ColorType.HUE: ColorFormat.HSV,
    ColorType.SATURATION: ColorFormat.HSV,
    ColorType.VALUE: ColorFormat.HSV,
}

format_fields = {
    ColorFormat.HEX: (ColorType.HEX,),
    ColorFormat.RGB: (ColorType.RED, ColorType.GREEN, ColorType.BLUE),
    ColorFormat.HSV: (ColorType.HUE, ColorType.SATURATION, ColorType.VALUE),
}

# Inclusive upper bound of each channel, lower bound is always 0
format_maxima = {
    ColorFormat.RGB: (MAX_CHANNEL, MAX_CHANNEL, MAX_CHANNEL),
    ColorFormat.HSV: (HUE_360, MAX_PERCENT, MAX_PERCENT),
}

format_classes = {
    ColorFormat.RGB: int,
    ColorFormat.HSV: float,
}
