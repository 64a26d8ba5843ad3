"""An angle corresponding to the rotation of the Earth, stored in radians."""

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
from .sexagesimal import from_sexa
from .types import AngleQuantity, SignLike
from .utils import check_unit, pmod

if TYPE_CHECKING:
    from .angle import Angle
    from .duration import Time

logger = logging.getLogger(__name__)


@define(frozen=True, order=True)
class HourAngle:
    """An angle of rotation where there are 24 hours to a revolution.

    The value is stored as radians, the same as :class:`~astrounit.Angle`, but the
    two are distinct types. Arithmetic only combines an HourAngle with another
    HourAngle; convert an Angle with :meth:`Angle.to_hour_angle` first.

    Parameters
    ----------
    rad
        The hour angle in radians.
    """

    rad: float = field(converter=float)

    @classmethod
    def from_hour(cls, h: float) -> Self:
        """Construct an HourAngle from hours of revolution."""
        return cls(h / 12 * math.pi)

    @classmethod
    def from_minute(cls, m: float) -> Self:
        """Construct an HourAngle from minutes of revolution, 60 to the hour."""
        return cls(m / 60 / 12 * math.pi)

    @classmethod
    def from_second(cls, s: float) -> Self:
        """Construct an HourAngle from seconds of revolution, 3600 to the hour."""
        return cls(s / 3600 / 12 * math.pi)

    @classmethod
    def from_sexa(cls, neg: SignLike, h: int, m: int, s: float) -> Self:
        """Construct an HourAngle from sign, hour, minute and second components.

        Pass "-" for ``neg`` to negate the result.
        """
        return cls(from_sexa(neg, h, m, s) / 12 * math.pi)

    @classmethod
    def from_quantity(cls, q: AngleQuantity) -> Self:
        """Construct an HourAngle from an astropy angular Quantity."""
        check_unit(q, un.hourangle, "q")
        return cls(q.to_value(un.rad))

    @property
    def hour(self) -> float:
        """The hour angle in hours of revolution."""
        return self.rad * 12 / math.pi

    @property
    def minute(self) -> float:
        """The hour angle in minutes of revolution."""
        return self.rad * 60 * 12 / math.pi

    @property
    def second(self) -> float:
        """The hour angle in seconds of revolution."""
        return self.rad * 3600 * 12 / math.pi

    def to_angle(self) -> Angle:
        """Return the Angle where one revolution corresponds to one circle."""
        from .angle import Angle

        return Angle(self.rad)

    def to_time(self) -> Time:
        """Return the Time where one revolution corresponds to one day."""
        from .duration import Time

        return Time(self.second)

    def to_quantity(self) -> apc.Angle:
        """Return the hour angle as an astropy Angle in hourangle units."""
        logger.debug("Converting %r to astropy Angle", self)
        return apc.Angle(self.hour, unit=un.hourangle)

    def mul(self, f: float) -> HourAngle:
        """Return the scalar product hour angle * f."""
        return HourAngle(self.rad * f)

    def div(self, d: float) -> HourAngle:
        """Return the scalar quotient hour angle / d."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return HourAngle(np.true_divide(self.rad, d))

    def mod1(self) -> HourAngle:
        """Return the hour angle wrapped to one revolution, in [0, 24h)."""
        return HourAngle(pmod(self.rad, FULL_CIRCLE_RAD))

    def sin(self) -> float:
        """Return the trigonometric sine of the angle."""
        return float(np.sin(self.rad))

    def cos(self) -> float:
        """Return the trigonometric cosine of the angle."""
        return float(np.cos(self.rad))

    def tan(self) -> float:
        """Return the trigonometric tangent of the angle."""
        return float(np.tan(self.rad))

    def abs(self) -> HourAngle:
        """Return the absolute value of the hour angle."""
        return HourAngle(abs(self.rad))

    def __add__(self, other):
        if not isinstance(other, HourAngle):
            return NotImplemented
        return HourAngle(self.rad + other.rad)

    def __sub__(self, other):
        if not isinstance(other, HourAngle):
            return NotImplemented
        return HourAngle(self.rad - other.rad)

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
        return HourAngle(-self.rad)

    def __abs__(self):
        return self.abs()

    def __str__(self):
        return str(self.rad)
