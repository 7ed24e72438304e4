from typing import Any, ClassVar, Tuple
from ..types.format_type import ColorFormat
from ..conversions import strip_hex, hex_to_rgb, hex_to_hsv
from .color_base import ColorBase


class HexColor(ColorBase):
    """A ``#RRGGBB`` code; input is case-insensitive and the '#' optional."""
    format: ClassVar[ColorFormat] = ColorFormat.HEX
    channel_names: ClassVar[Tuple[str, ...]] = ("hex",)

    @classmethod
    def _coerce(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise TypeError(f"hex expects a string, got {type(value).__name__}")
        return "#" + strip_hex(value).upper()

    @property
    def code(self) -> str:
        return self._value

    @property
    def digits(self) -> str:
        return self._value[1:]

    def __iter__(self):
        return iter((self._value,))

    def __len__(self) -> int:
        return 1

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            try:
                return self._value == self._coerce(other)
            except ValueError:
                return False
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash((self.format, self._value))

    def __str__(self) -> str:
        return self._value

    def to_rgb(self):
        from .rgb import RgbColor
        return RgbColor(hex_to_rgb(self._value))

    def to_hsv(self):
        from .hsv import HsvColor
        return HsvColor(hex_to_hsv(self._value))


HEX = HexColor
