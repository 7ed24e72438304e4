"""
Sextant lookup for HSV → RGB.

The hue circle is cut into six 60° sextants. Inside a sextant every RGB channel
plays one fixed role: it stays at the maximum, stays at the minimum, rises
linearly from the minimum or falls linearly from the maximum.
"""
import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import Role, HUE_360, SEXTANT_WIDTH

# (R, G, B) roles per sextant
SEXTANT_ROLES: tuple[tuple[Role, Role, Role], ...] = (
    (Role.MAX, Role.RISING, Role.MIN),
    (Role.FALLING, Role.MAX, Role.MIN),
    (Role.MIN, Role.MAX, Role.RISING),
    (Role.MIN, Role.FALLING, Role.MAX),
    (Role.RISING, Role.MIN, Role.MAX),
    (Role.MAX, Role.MIN, Role.FALLING),
)

SEXTANT_ROLE_ARRAY = np.array(SEXTANT_ROLES, dtype=np.intp)


def sextant_of(hue: float) -> int:
    """
    Index of the sextant a hue falls into.

    Any hue is accepted: negative and over-range values are wrapped into
    [0, 360) first, so 360 and -30 land in the same sextants as 0 and 330.
    """
    # float modulo can round up to exactly 360 for tiny negative hues
    return int(hue % HUE_360 // SEXTANT_WIDTH) % 6


def np_sextant_of(hue: NDArray) -> NDArray:
    """Vectorized sextant_of."""
    hue = np.asarray(hue, dtype=float)
    return np.floor_divide(np.mod(hue, HUE_360), SEXTANT_WIDTH).astype(np.intp) % 6


def apply_role(role: Role, h: float, dh: float, minimum: float, maximum: float, slope: float) -> float:
    """
    Evaluate one channel for a hue inside its sextant.

    Args:
        role: Role of the channel in the current sextant
        h: Hue in degrees, wrapped into [0, 360)
        dh: Lower bound of the current sextant in degrees
        minimum: Channel floor, (1 - s) * v
        maximum: Channel ceiling, v
        slope: Change per degree, v * s / 60

    Returns:
        Channel intensity in [0, 1]
    """
    if role == Role.MAX:
        return maximum
    if role == Role.MIN:
        return minimum
    if role == Role.RISING:
        return slope * (h - dh) + minimum
    if role == Role.FALLING:
        return maximum - slope * (h - dh)
    raise ValueError(f"Unknown channel role: {role!r}")
