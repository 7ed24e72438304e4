"""Exceptions raised by chromaslice.

All custom exceptions inherit from ChromaSliceError so callers can catch every
library error in one place. Each error also derives from ``ValueError`` where
the failure is about a bad input value, so generic handlers keep working.

- `recoverable`: whether the caller is expected to resynchronize and carry on
  (bad typed text) rather than treat the error as a programming mistake
  (out-of-domain numbers handed to a converter).
"""

from typing import Optional


class ChromaSliceError(Exception):
    """
    Base exception for all chromaslice errors.

    Attributes:
        message: Human-friendly description of the failure
        recoverable: True if the caller can discard the input and resync
    """

    recoverable: bool = False

    def __init__(self, message: str, recoverable: Optional[bool] = None):
        super().__init__(message)
        self.message = message
        if recoverable is not None:
            self.recoverable = recoverable

    def __str__(self) -> str:
        return self.message


class OutOfRangeError(ChromaSliceError, ValueError):
    """A number outside its declared domain reached a converter."""

    def __init__(self, name: str, value: float, minimum: float, maximum: float):
        super().__init__(f"{name} must be within [{minimum}, {maximum}], got {value!r}")
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class MalformedColorCodeError(ChromaSliceError, ValueError):
    """Text does not match the grammar of its color format."""

    recoverable = True

    def __init__(self, text: str, reason: str):
        super().__init__(f"Invalid color code {text!r}: {reason}")
        self.text = text
        self.reason = reason


class MalformedHexError(MalformedColorCodeError):
    """Hex code is not exactly 6 hex digits after stripping an optional '#'."""

    def __init__(self, text: str):
        super().__init__(text, "hex codes must contain exactly 6 hex digits")


class InvalidDimensionError(ChromaSliceError, ValueError):
    """A non-positive width or height was handed to the rasterizer."""

    def __init__(self, name: str, value):
        super().__init__(f"{name} must be a positive integer, got {value!r}")
        self.name = name
        self.value = value
