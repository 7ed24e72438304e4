from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple, Union

from ..conversions import convert
from ..conversions.domain import check_channel
from ..types.format_type import ColorFormat, format_maxima, format_classes
from ..utils import get_dimension


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    format: ClassVar[ColorFormat]
    channel_names: ClassVar[Tuple[str, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ColorBase, Tuple[Any, ...], str]) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            value = convert(value.channels, value.format, self.format)

        self._value = self._coerce(value)

        # frozen from here on
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _coerce(cls, value: Any) -> Any:
        maxima = format_maxima[cls.format]
        if get_dimension(value) != len(maxima):
            raise ValueError(f"{cls.format.value} expects a {len(maxima)}-channel value, got {value!r}")

        # range check before the type cast so 255.5 is not truncated into range
        for name, channel, maximum in zip(cls.channel_names, value, maxima):
            check_channel(name, channel, maximum)

        cast = format_classes[cls.format]
        return tuple(cast(channel) for channel in value)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def channels(self) -> Any:
        return self._value

    def convert(self, to_format: ColorFormat | str) -> ColorBase:
        """Return this color as an instance of the class registered for ``to_format``."""
        from . import get_color_class
        return get_color_class(to_format)(self)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._value)

    def __getitem__(self, index: int) -> Any:
        return self._value[index]

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorBase):
            return self.format == other.format and self._value == other._value
        if isinstance(other, tuple):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.format, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


def build_registry(*classes: type[ColorBase]) -> dict[ColorFormat, type[ColorBase]]:
    return {cls.format: cls for cls in classes}
