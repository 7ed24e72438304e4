"""
Committing typed fields, copying and pasting whole color codes.

Commits are all-or-nothing: if a single field of a format fails full
validation, none of the user's fields are applied and every field is
re-derived from the current color.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence, Tuple

from ..colors import ColorBase
from ..types.format_type import ColorFormat, ColorType, format_fields
from .formatting import field_texts, with_unit, wrap_fields
from .parsing import parse_fields, from_string
from .validation import are_valid, is_valid_code

logger = logging.getLogger(__name__)

# Order in which pasted text is matched against the whole-code grammars
PASTE_ORDER = (ColorFormat.HEX, ColorFormat.RGB, ColorFormat.HSV)


@dataclass(frozen=True)
class CommitResult:
    """
    Outcome of committing the fields of one format.

    Attributes:
        fields: Field texts to display after the commit, units completed
        value: Color the fields now describe
        applied: False when the user's input was discarded
    """
    fields: Tuple[str, ...]
    value: ColorBase
    applied: bool


class PasteResult(NamedTuple):
    color_format: ColorFormat
    value: ColorBase


def commit(
    color_format: ColorFormat | str,
    fields: Sequence[str],
    current: ColorBase,
) -> CommitResult:
    """
    Resolve the typed fields of a format on focus loss or confirmation.

    Args:
        color_format: Format being edited
        fields: Current text of each field, possibly empty or invalid
        current: Color shown before the edit, used when the edit is discarded

    Returns:
        CommitResult with the fields to display and the resulting color
    """
    color_format = ColorFormat(color_format)
    color_types = format_fields[color_format]

    if are_valid(color_format, fields):
        completed = tuple(with_unit(color_type, field) for color_type, field in zip(color_types, fields))
        return CommitResult(completed, parse_fields(color_format, completed), True)

    logger.debug("Discarding %s fields %r, resyncing to %r", color_format.value, tuple(fields), current)
    value = current.convert(color_format)
    return CommitResult(field_texts(value), value, False)


def detect_format(text: str) -> Optional[ColorFormat]:
    """Format of a whole color code, trying hex, then rgb, then hsv."""
    candidate = text.strip()
    for color_format in PASTE_ORDER:
        if is_valid_code(color_format, candidate):
            return color_format
    return None


def paste(text: str) -> Optional[PasteResult]:
    """
    Interpret clipboard text as a whole color code.

    Returns:
        The detected format and its color, or None when the text is no whole
        code and should go into the focused field instead (see paste_field)
    """
    color_format = detect_format(text)
    if color_format is None:
        logger.debug("Clipboard text %r is not a whole color code", text)
        return None
    return PasteResult(color_format, from_string(color_format, text.strip()))


def paste_field(
    color_type: ColorType | str,
    content: str,
    fields: Sequence[str],
    current: ColorBase,
) -> CommitResult:
    """
    Paste text into the focused field, then commit its whole format.

    Args:
        color_type: Field holding the focus
        content: Clipboard text
        fields: Current text of every field of the focused field's format
        current: Color shown before the paste
    """
    color_type = ColorType(color_type)
    color_format = color_type.color_format
    index = format_fields[color_format].index(color_type)

    updated = list(fields)
    updated[index] = content
    return commit(color_format, updated, current)


def copy_text(
    color_format: ColorFormat | str,
    fields: Sequence[str],
    current: ColorBase,
) -> str:
    """
    Whole code to put on the clipboard for the fields of a format.

    Valid fields are copied as typed (units completed); otherwise the code of
    the current color is copied.
    """
    result = commit(color_format, fields, current)
    return wrap_fields(color_format, result.fields)


def apply_text(color_format: ColorFormat | str, text: str, current: ColorBase) -> CommitResult:
    """Commit a whole typed code, falling back to ``current`` when it does not parse."""
    color_format = ColorFormat(color_format)
    if is_valid_code(color_format, text):
        value = from_string(color_format, text)
        return CommitResult(field_texts(value), value, True)
    value = current.convert(color_format)
    return CommitResult(field_texts(value), value, False)
