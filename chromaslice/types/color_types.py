from __future__ import annotations
from typing import Tuple, Union
from numpy import ndarray

RgbTuple = Tuple[int, int, int]
HsvTuple = Tuple[float, float, float]
ColorElement = Union[RgbTuple, HsvTuple, str]
PixelBuffer = ndarray  # 1-D uint32, row-major ARGB
