"""Shared types definitions for the root finding package."""

from typing import Callable

import numpy as np

# Type aliases for cleaner signatures
ScalarFunction = Callable[[float], float]


def as_float(x: float) -> float:
    """Convert a scalar to a double precision Python float."""
    return float(np.float64(x))


def is_finite(x: float) -> bool:
    """True unless x is NaN, +/- infinity, or too large for a double."""
    try:
        return bool(np.isfinite(as_float(x)))
    except OverflowError:
        return False


def opposite_signs(a: float, b: float) -> bool:
    """Strict sign change between a and b.

    Compares signs directly, so tiny or huge values whose product would
    underflow or overflow are still classified correctly. Zero has no sign.
    """
    return (a < 0.0 < b) or (b < 0.0 < a)
