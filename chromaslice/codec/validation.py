"""
Keystroke and commit validation of color code fields.

Partial validation runs on every edit of a field and is permissive of
incomplete input: "2" and "25" are accepted on the way to "255", and a field
may transiently be empty. Full validation runs on commit and requires a
complete field.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable

from ..types.format_type import ColorFormat, ColorType, format_fields
from .grammar import partial_patterns, field_patterns, code_patterns

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldEdit:
    """
    A proposed edit of a text field: replace ``control_text[range_start:range_end]``
    with ``text``.
    """
    control_text: str
    range_start: int
    range_end: int
    text: str
    accepted: bool = True

    @property
    def result(self) -> str:
        """Field text once the edit is applied."""
        return self.control_text[:self.range_start] + self.text + self.control_text[self.range_end:]

    def rejected(self) -> FieldEdit:
        """The same edit with nothing inserted and the selection collapsed."""
        return replace(self, text="", range_end=self.range_start, accepted=False)


def strip_unit(color_type: ColorType | str, text: str) -> str:
    """
    Remove the field's unit prefix.

    A lone unit letter ("r" while the user is about to type ":") counts as a
    unit in progress and strips to "".
    """
    unit = ColorType(color_type).unit
    if text.startswith(unit):
        return text[len(unit):]
    if text == unit[0]:
        return ""
    return text


def is_partial(color_type: ColorType | str, text: str) -> bool:
    """Whether ``text`` is a field still being typed that can become valid."""
    color_type = ColorType(color_type)
    number = strip_unit(color_type, text)
    # only units (or nothing) present
    if number == "":
        return True
    return partial_patterns[color_type].fullmatch(number) is not None


def partial_validate(
    color_type: ColorType | str,
    control_text: str,
    range_start: int,
    range_end: int,
    text: str,
) -> FieldEdit:
    """
    Check a single keystroke/paste edit of a field.

    Args:
        color_type: Field being edited
        control_text: Text the field holds before the edit
        range_start: Start of the replaced selection (caret when nothing is selected)
        range_end: End of the replaced selection
        text: Inserted text

    Returns:
        The edit, unchanged if accepted; otherwise with the inserted text
        emptied and the selection collapsed, which leaves the field as it was
    """
    if not 0 <= range_start <= range_end <= len(control_text):
        raise ValueError(
            f"Selection [{range_start}, {range_end}] is outside a field of length {len(control_text)}"
        )

    edit = FieldEdit(control_text, range_start, range_end, text)
    if is_partial(color_type, edit.result):
        return edit

    logger.debug("Rejected %s edit %r -> %r", ColorType(color_type).value, control_text, edit.result)
    return edit.rejected()


def make_validator(color_type: ColorType | str) -> Callable[[FieldEdit], FieldEdit]:
    """Bind partial validation to one field, for text-input filters that pass edits around."""
    color_type = ColorType(color_type)

    def validate(edit: FieldEdit) -> FieldEdit:
        return partial_validate(color_type, edit.control_text, edit.range_start, edit.range_end, edit.text)

    return validate


def is_valid(color_type: ColorType | str, text: str) -> bool:
    """Full validation of one committed field, unit prefix optional."""
    return field_patterns[ColorType(color_type)].fullmatch(text) is not None


def is_valid_code(color_format: ColorFormat | str, text: str) -> bool:
    """Full validation of a whole color code such as ``rgb(r:255, g:0, b:0)``."""
    return code_patterns[ColorFormat(color_format)].fullmatch(text) is not None


def are_valid(color_format: ColorFormat | str, fields: tuple[str, ...] | list[str]) -> bool:
    """All-or-nothing check of every field of a format."""
    color_types = format_fields[ColorFormat(color_format)]
    if len(fields) != len(color_types):
        return False
    return all(is_valid(color_type, field) for color_type, field in zip(color_types, fields))
