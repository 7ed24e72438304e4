# No dependencies
"""Library-wide defaults used when a caller does not provide its own values."""

DEFAULT_HUE = 0.0
DEFAULT_SATURATION = 100.0
DEFAULT_VALUE = 100.0

DEFAULT_RGB = (255, 0, 0)
DEFAULT_HSV = (DEFAULT_HUE, DEFAULT_SATURATION, DEFAULT_VALUE)
DEFAULT_HEX = "#FF0000"

DEFAULT_WIDTH = 256
DEFAULT_HEIGHT = 256

OPAQUE_ALPHA = 0xFF
