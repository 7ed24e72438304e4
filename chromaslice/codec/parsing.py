from __future__ import annotations

from typing import Sequence

from ..colors import ColorBase, HexColor, get_color_class
from ..exceptions import MalformedColorCodeError, MalformedHexError
from ..types.format_type import ColorFormat, ColorType, format_fields
from .grammar import field_patterns, code_patterns, wrapper_patterns


def parse_field(color_type: ColorType | str, text: str) -> int:
    """
    Parse one committed field such as ``"r:255"`` or ``"255"``.

    Raises:
        MalformedColorCodeError: if the field does not match its grammar
    """
    color_type = ColorType(color_type)
    match = field_patterns[color_type].fullmatch(text)
    if match is None:
        raise MalformedColorCodeError(text, f"not a valid {color_type.value} field")
    return int(match.group(1))


def parse_fields(color_format: ColorFormat | str, fields: Sequence[str]) -> ColorBase:
    """
    Parse the separately typed fields of one format into a color.

    Args:
        color_format: Format the fields belong to
        fields: One string per field, unit prefixes optional

    Returns:
        RgbColor, HsvColor or HexColor
    """
    color_format = ColorFormat(color_format)
    color_types = format_fields[color_format]
    if len(fields) != len(color_types):
        raise MalformedColorCodeError(
            ", ".join(fields), f"{color_format.value} expects {len(color_types)} fields, got {len(fields)}"
        )

    if color_format is ColorFormat.HEX:
        if not field_patterns[ColorType.HEX].fullmatch(fields[0]):
            raise MalformedHexError(fields[0])
        return HexColor(fields[0])

    values = tuple(parse_field(color_type, field) for color_type, field in zip(color_types, fields))
    return get_color_class(color_format)(values)


def from_string(color_format: ColorFormat | str, text: str) -> ColorBase:
    """
    Parse a whole color code.

    Accepted forms (whitespace around tokens is free, units are optional):
        hex: ``#FF0000`` or ``ff0000``
        rgb: ``rgb(r:255, g:0, b:0)``
        hsv: ``hsv(h:0, s:100, v:100)``

    Raises:
        MalformedHexError: for a hex code that is not exactly 6 hex digits
        MalformedColorCodeError: if the wrapper, the number of fields or any
            field does not match its grammar
    """
    color_format = ColorFormat(color_format)

    if color_format is ColorFormat.HEX:
        if not code_patterns[ColorFormat.HEX].fullmatch(text):
            raise MalformedHexError(text)
        return HexColor(text)

    wrapper = wrapper_patterns[color_format].fullmatch(text)
    if wrapper is None:
        raise MalformedColorCodeError(text, f"expected {color_format.value}(...)")

    parts = wrapper.group(1).split(",")
    color_types = format_fields[color_format]
    if len(parts) != len(color_types):
        raise MalformedColorCodeError(
            text, f"expected {len(color_types)} comma-separated fields, got {len(parts)}"
        )

    values = []
    for color_type, part in zip(color_types, parts):
        field = part.strip()
        if field.startswith(color_type.unit):
            field = color_type.unit + field[len(color_type.unit):].lstrip()
        try:
            values.append(parse_field(color_type, field))
        except MalformedColorCodeError as exc:
            raise MalformedColorCodeError(text, exc.reason) from exc

    return get_color_class(color_format)(tuple(values))
