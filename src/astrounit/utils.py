"""Utility functions."""

import math

import numpy as np
from astropy import units as un
from astropy.units import Quantity


def pmod(x: float, y: float) -> float:
    """Return x modulo y with the sign of y.

    This is floor modulo, so ``pmod(-5, 3) == 1`` and ``pmod(-2.5, 360) == 357.5``,
    unlike the truncating remainder of :func:`math.fmod`. The result is always in
    the half-open range [0, y) for positive y.
    """
    r = float(np.mod(x, y))
    # A tiny negative x rounds up to exactly y.
    return 0.0 if r == y else r


def round_half_away(x: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def check_unit(value, unit: un.Unit | str, name: str) -> Quantity:
    """Check that ``value`` is a Quantity with units compatible with ``unit``."""
    if not isinstance(value, Quantity):
        raise TypeError(f"{name} must be a Quantity, got {type(value)}")

    if not value.unit.is_equivalent(unit):
        raise ValueError(
            f"{name} must have units compatible with {unit}, got {value.unit}"
        )

    if not value.isscalar:
        raise ValueError(f"{name} must be a scalar")

    return value
