from .format_type import (
    ColorFormat,
    ColorType,
    Role,
    HUE_360,
    SEXTANT_WIDTH,
    MAX_CHANNEL,
    MAX_PERCENT,
    field_units,
    field_formats,
    format_fields,
    format_maxima,
    format_classes,
)
from .color_types import (
    RgbTuple,
    HsvTuple,
    ColorElement,
    PixelBuffer,
)

__all__ = [
    "ColorFormat",
    "ColorType",
    "Role",
    "HUE_360",
    "SEXTANT_WIDTH",
    "MAX_CHANNEL",
    "MAX_PERCENT",
    "field_units",
    "field_formats",
    "format_fields",
    "format_maxima",
    "format_classes",
    "RgbTuple",
    "HsvTuple",
    "ColorElement",
    "PixelBuffer",
]
