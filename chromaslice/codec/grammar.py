"""
Regular grammars for typed color codes.

The numeric alternatives reject out-of-range literals syntactically: "256",
"361" or "101" never match, so no out-of-range integer is ever built from
text. Leading zeros are not allowed beyond a lone single digit.
"""
import re

from ..types.format_type import ColorFormat, ColorType

# numeric bases
CHANNEL = r"(?:\d|[1-9]\d|1\d\d|2[0-4]\d|25[0-5])"
HUE = r"(?:\d|[1-9]\d|[12]\d\d|3[0-5]\d|360)"
PERCENT = r"(?:\d|[1-9]\d|100)"

HEX_DIGIT = r"[0-9a-fA-F]"

field_numbers = {
    ColorType.RED: CHANNEL,
    ColorType.GREEN: CHANNEL,
    ColorType.BLUE: CHANNEL,
    ColorType.HUE: HUE,
    ColorType.SATURATION: PERCENT,
    ColorType.VALUE: PERCENT,
    ColorType.HEX: HEX_DIGIT + r"{6}",
}

# what may remain of a field once its unit is stripped, while still typing
partial_patterns = {
    color_type: re.compile(HEX_DIGIT + r"{0,6}" if color_type is ColorType.HEX else number)
    for color_type, number in field_numbers.items()
}

# a single committed field, unit optional
field_patterns = {
    color_type: re.compile(f"(?:{re.escape(color_type.unit)})?({number})")
    for color_type, number in field_numbers.items()
}


def _wrapped(name: str, fields: tuple[ColorType, ...]) -> re.Pattern:
    body = r"\s*,".join(
        rf"\s*(?:{re.escape(color_type.unit)})?\s*({field_numbers[color_type]})"
        for color_type in fields
    )
    return re.compile(rf"\s*{name}\s*\({body}\s*\)\s*")


# whole color codes: #RRGGBB, rgb(r:R, g:G, b:B), hsv(h:H, s:S, v:V)
code_patterns = {
    ColorFormat.HEX: re.compile(rf"#?({HEX_DIGIT}{{6}})"),
    ColorFormat.RGB: _wrapped("rgb", (ColorType.RED, ColorType.GREEN, ColorType.BLUE)),
    ColorFormat.HSV: _wrapped("hsv", (ColorType.HUE, ColorType.SATURATION, ColorType.VALUE)),
}

# wrapper only, used to report which part of a bad code failed
wrapper_patterns = {
    ColorFormat.RGB: re.compile(r"\s*rgb\s*\((.*)\)\s*", re.DOTALL),
    ColorFormat.HSV: re.compile(r"\s*hsv\s*\((.*)\)\s*", re.DOTALL),
}
