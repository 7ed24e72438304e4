"""
Chromaslice Color Codec
=======================

Parsing, validation and formatting of human-typed color codes.

Formats
-------
    hex: ``#RRGGBB`` (case-insensitive, '#' optional on input)
    rgb: ``rgb(r:R, g:G, b:B)`` with fields ``r:``, ``g:``, ``b:`` in 0-255
    hsv: ``hsv(h:H, s:S, v:V)`` with hue in 0-360, saturation/value in 0-100

Field grammars exclude out-of-range literals syntactically ("256" never
matches a channel).

Typing
------
    partial_validate(color_type, control_text, start, end, text)
        Per-keystroke check; an empty field or a bare unit is accepted
    make_validator(color_type)

Committing
----------
    is_valid(color_type, text), is_valid_code(color_format, text)
    commit(color_format, fields, current)
        All-or-nothing: one bad field discards every field
    from_string(color_format, text), parse_fields(color_format, fields)
    to_string(value, with_units=True), field_texts(value, with_units=True)

Clipboard
---------
    detect_format(text), paste(text), paste_field(...), copy_text(...)
"""

from .validation import (
    FieldEdit,
    strip_unit,
    is_partial,
    partial_validate,
    make_validator,
    is_valid,
    is_valid_code,
    are_valid,
)
from .parsing import parse_field, parse_fields, from_string
from .formatting import with_unit, field_texts, to_string, wrap_fields, reset_fields
from .commit import (
    CommitResult,
    PasteResult,
    PASTE_ORDER,
    commit,
    detect_format,
    paste,
    paste_field,
    copy_text,
    apply_text,
)

__all__ = [
    # typing
    "FieldEdit",
    "strip_unit",
    "is_partial",
    "partial_validate",
    "make_validator",
    # full validation
    "is_valid",
    "is_valid_code",
    "are_valid",
    # parsing
    "parse_field",
    "parse_fields",
    "from_string",
    # formatting
    "with_unit",
    "field_texts",
    "to_string",
    "wrap_fields",
    "reset_fields",
    # committing and clipboard
    "CommitResult",
    "PasteResult",
    "PASTE_ORDER",
    "commit",
    "detect_format",
    "paste",
    "paste_field",
    "copy_text",
    "apply_text",
]
