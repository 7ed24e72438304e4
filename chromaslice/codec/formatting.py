from __future__ import annotations

from typing import Optional, Tuple, Union

from ..colors import ColorBase, HexColor, get_color_class
from ..config import DEFAULT_RGB, DEFAULT_HSV, DEFAULT_HEX
from ..types.format_type import ColorFormat, ColorType, HUE_360, format_fields
from ..utils import truncate

default_colors = {
    ColorFormat.HEX: DEFAULT_HEX,
    ColorFormat.RGB: DEFAULT_RGB,
    ColorFormat.HSV: DEFAULT_HSV,
}


def _as_color(value: Union[ColorBase, tuple, str], color_format: Optional[ColorFormat | str]) -> ColorBase:
    if isinstance(value, ColorBase):
        if color_format is None or ColorFormat(color_format) == value.format:
            return value
        return value.convert(color_format)
    if color_format is None:
        raise ValueError("color_format is required when formatting a raw tuple or string")
    return get_color_class(color_format)(value)


def with_unit(color_type: ColorType | str, text: str) -> str:
    """Complete a field that lacks its unit prefix: ``"255"`` → ``"r:255"``."""
    unit = ColorType(color_type).unit
    return text if text.startswith(unit) else unit + text


def field_texts(
    value: Union[ColorBase, tuple, str],
    with_units: bool = True,
    color_format: Optional[ColorFormat | str] = None,
) -> Tuple[str, ...]:
    """
    Display text of each field of a color.

    Float fields are truncated, not rounded: hue 59.9 displays as ``59``.
    Hue 360 displays as ``0``. Hex always carries its '#'.

    Args:
        value: Color, or a raw tuple/string together with ``color_format``
        with_units: Prefix every field with its unit (``r:``, ``h:``...)
        color_format: Format to display in; defaults to the color's own format
    """
    color = _as_color(value, color_format)

    if isinstance(color, HexColor):
        return (color.code,)

    texts = []
    for color_type, channel in zip(format_fields[color.format], color.channels):
        number = truncate(channel)
        if color_type is ColorType.HUE:
            number %= HUE_360
        text = str(number)
        texts.append(with_unit(color_type, text) if with_units else text)
    return tuple(texts)


def to_string(
    value: Union[ColorBase, tuple, str],
    with_units: bool = True,
    color_format: Optional[ColorFormat | str] = None,
) -> str:
    """
    Canonical text of a whole color code.

    Examples:
        ``#FF0000``, ``rgb(r:255, g:0, b:0)``, ``hsv(h:0, s:100, v:100)``;
        without units ``rgb(255, 0, 0)``.
    """
    color = _as_color(value, color_format)
    texts = field_texts(color, with_units)
    if isinstance(color, HexColor):
        return texts[0]
    return f"{color.format.value}({', '.join(texts)})"


def wrap_fields(color_format: ColorFormat | str, fields: Tuple[str, ...]) -> str:
    """Join already validated field texts into a whole code."""
    color_format = ColorFormat(color_format)
    if color_format is ColorFormat.HEX:
        return with_unit(ColorType.HEX, fields[0])
    return f"{color_format.value}({', '.join(fields)})"


def reset_fields(color_format: ColorFormat | str) -> Tuple[str, ...]:
    """Field texts of the default color of a format."""
    color_format = ColorFormat(color_format)
    return field_texts(default_colors[color_format], color_format=color_format)


__all__ = [
    "with_unit",
    "field_texts",
    "to_string",
    "wrap_fields",
    "reset_fields",
]
