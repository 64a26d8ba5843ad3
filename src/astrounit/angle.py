"""A general purpose plane angle, stored in radians."""

from __future__ import annotations

import logging
import math
import numbers
from typing import TYPE_CHECKING

import numpy as np
from astropy import coordinates as apc
from astropy import units as un
from attrs import define, field
from typing_extensions import Self

from .constants import FULL_CIRCLE_RAD
from .sexagesimal import from_sexa_sec
from .types import AngleQuantity, SignLike
from .utils import check_unit, pmod

if TYPE_CHECKING:
    from .duration import Time
    from .hourangle import HourAngle

logger = logging.getLogger(__name__)


@define(frozen=True, order=True)
class Angle:
    """A general purpose angle.

    There are 360 degrees, or 2π radians, to a circle. The value is stored as
    radians and there is no ``from_rad`` constructor: ``Angle(rad)`` involves no
    scaling.

    Ordering compares the radian values directly and does not account for
    wrap-around, so an angle just below 2π compares greater than one just above
    zero. Use :meth:`mod1` on both sides first if that matters.

    Parameters
    ----------
    rad
        The angle in radians.
    """

    rad: float = field(converter=float)

    @classmethod
    def from_deg(cls, d: float) -> Self:
        """Construct an Angle from degrees."""
        return cls(d / 180 * math.pi)

    @classmethod
    def from_arcmin(cls, m: float) -> Self:
        """Construct an Angle from arc-minutes, 60 to the degree."""
        return cls(m / 60 / 180 * math.pi)

    @classmethod
    def from_arcsec(cls, s: float) -> Self:
        """Construct an Angle from arc-seconds, 3600 to the degree."""
        return cls(s / 3600 / 180 * math.pi)

    @classmethod
    def from_sexa(cls, neg: SignLike, d: int, m: int, s: float) -> Self:
        """Construct an Angle from sign, degree, minute and second components.

        Pass "-" for ``neg`` to negate the result. The components are not range
        checked, see :mod:`astrounit.sexagesimal`.
        """
        return cls.from_arcsec(from_sexa_sec(neg, d, m, s))

    @classmethod
    def from_quantity(cls, q: AngleQuantity) -> Self:
        """Construct an Angle from an astropy angular Quantity."""
        check_unit(q, un.rad, "q")
        return cls(q.to_value(un.rad))

    @property
    def deg(self) -> float:
        """The angle in degrees."""
        return self.rad * 180 / math.pi

    @property
    def arcmin(self) -> float:
        """The angle in arc-minutes."""
        return self.rad * 60 * 180 / math.pi

    @property
    def arcsec(self) -> float:
        """The angle in arc-seconds."""
        return self.rad * 3600 * 180 / math.pi

    def to_hour_angle(self) -> HourAngle:
        """Return the HourAngle where one circle corresponds to one revolution."""
        from .hourangle import HourAngle

        return HourAngle(self.rad)

    def to_time(self) -> Time:
        """Return the Time where one circle corresponds to one day."""
        from .duration import Time

        return Time.from_rad(self.rad)

    def to_quantity(self) -> apc.Angle:
        """Return the angle as an astropy Angle in degrees."""
        logger.debug("Converting %r to astropy Angle", self)
        return apc.Angle(self.deg, unit=un.deg)

    def mul(self, f: float) -> Angle:
        """Return the scalar product angle * f."""
        return Angle(self.rad * f)

    def div(self, d: float) -> Angle:
        """Return the scalar quotient angle / d."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return Angle(np.true_divide(self.rad, d))

    def mod1(self) -> Angle:
        """Return the angle wrapped to one circle, in [0, 2π)."""
        return Angle(pmod(self.rad, FULL_CIRCLE_RAD))

    def sin(self) -> float:
        """Return the trigonometric sine of the angle."""
        return float(np.sin(self.rad))

    def cos(self) -> float:
        """Return the trigonometric cosine of the angle."""
        return float(np.cos(self.rad))

    def tan(self) -> float:
        """Return the trigonometric tangent of the angle."""
        return float(np.tan(self.rad))

    def abs(self) -> Angle:
        """Return the absolute value of the angle."""
        return Angle(abs(self.rad))

    def __add__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.rad + other.rad)

    def __sub__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.rad - other.rad)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.mul(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.div(scalar)

    def __neg__(self):
        return Angle(-self.rad)

    def __abs__(self):
        return self.abs()

    def __str__(self):
        """Return the radian value as a string."""
        return str(self.rad)
