"""A duration or relative time, stored in seconds."""

from __future__ import annotations

import datetime
import logging
import math
import numbers
from typing import TYPE_CHECKING

import numpy as np
from astropy import time as apt
from astropy import units as un
from attrs import define, field
from typing_extensions import Self

from .constants import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from .sexagesimal import sign_factor
from .types import SignLike, TimeQuantity
from .utils import check_unit, pmod, round_half_away

if TYPE_CHECKING:
    from .angle import Angle
    from .hourangle import HourAngle

logger = logging.getLogger(__name__)


@define(frozen=True, order=True)
class Time:
    """A duration or relative time.

    The value is stored as seconds. For conversion to and from angles, one day of
    Time corresponds to one circle of Angle and one revolution of HourAngle.

    Parameters
    ----------
    sec
        The time in seconds.
    """

    sec: float = field(converter=float)

    @classmethod
    def from_sexa(cls, neg: SignLike, h: int, m: int, s: float) -> Self:
        """Construct a Time from sign, hour, minute and second components.

        Pass "-" for ``neg`` to negate the result. The components are not range
        checked, see :mod:`astrounit.sexagesimal`.
        """
        return cls((s + (h * 60 + m) * 60) * sign_factor(neg))

    @classmethod
    def from_day(cls, d: float) -> Self:
        return cls(d * 3600 * 24)

    @classmethod
    def from_hour(cls, h: float) -> Self:
        return cls(h * 3600)

    @classmethod
    def from_minute(cls, m: float) -> Self:
        return cls(m * 60)

    @classmethod
    def from_rad(cls, rad: float) -> Self:
        """Construct a Time from radians, where 2π radians is one day."""
        # 12 hours, or pi radians, in half a day.
        return cls(rad * 3600 * 12 / math.pi)

    @classmethod
    def from_quantity(cls, q: TimeQuantity) -> Self:
        """Construct a Time from an astropy Quantity with units of time."""
        check_unit(q, un.s, "q")
        return cls(q.to_value(un.s))

    @classmethod
    def from_timedelta(cls, td: apt.TimeDelta | datetime.timedelta) -> Self:
        """Construct a Time from an astropy TimeDelta or a datetime.timedelta."""
        if isinstance(td, apt.TimeDelta):
            if not td.isscalar:
                raise ValueError("td must be a scalar TimeDelta")
            return cls(td.to_value("sec"))
        elif isinstance(td, datetime.timedelta):
            return cls(td.total_seconds())
        else:
            raise TypeError(f"Invalid type for td: {type(td)}")

    @property
    def day(self) -> float:
        return self.sec / 3600 / 24

    @property
    def hour(self) -> float:
        return self.sec / 3600

    @property
    def minute(self) -> float:
        return self.sec / 60

    @property
    def rad(self) -> float:
        """The time in radians, where one day is 2π radians of rotation."""
        return self.sec / 3600 / 12 * math.pi

    def to_angle(self) -> Angle:
        """Return the equivalent Angle, where one day is one circle."""
        from .angle import Angle

        return Angle(self.rad)

    def to_hour_angle(self) -> HourAngle:
        """Return the equivalent HourAngle, where one day is 24 hours of rotation."""
        from .hourangle import HourAngle

        return HourAngle(self.rad)

    def to_quantity(self) -> un.Quantity:
        """Return the time as an astropy Quantity in seconds."""
        return self.sec * un.s

    def to_timedelta(self) -> apt.TimeDelta:
        """Return the time as an astropy TimeDelta."""
        logger.debug("Converting %r to astropy TimeDelta", self)
        return apt.TimeDelta(self.sec, format="sec")

    def to_pytimedelta(self) -> datetime.timedelta:
        """Return the time as a datetime.timedelta, to microsecond precision."""
        return datetime.timedelta(microseconds=self._microseconds())

    def mul(self, f: float) -> Time:
        """Return the scalar product time * f."""
        return Time(self.sec * f)

    def div(self, d: float) -> Time:
        """Return the scalar quotient time / d."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return Time(np.true_divide(self.sec, d))

    def mod1(self) -> Time:
        """Return the time wrapped to one day, in [0, 86400) seconds.

        Negative times wrap to the equivalent positive time of day.
        """
        return Time(pmod(self.sec, SECONDS_PER_DAY))

    def abs(self) -> Time:
        """Return the absolute value of the time."""
        return Time(abs(self.sec))

    def _microseconds(self) -> int:
        """The time as a whole number of microseconds.

        The seconds and milliseconds are truncated and the remaining microseconds
        rounded, so that the three parts recombine to the stored value.
        """
        if not math.isfinite(self.sec):
            raise ValueError(f"Cannot decompose a non-finite time: {self.sec}")

        secs = math.trunc(self.sec)
        millis_frac = (self.sec - secs) * 1000
        millis = math.trunc(millis_frac)
        micros = round_half_away((millis_frac - millis) * 1000)
        return secs * 1_000_000 + millis * 1000 + micros

    def to_duration_string(self) -> str:
        """Return the time formatted as a signed ``H:MM:SS.ffffff`` string.

        The hours are unbounded, so a time longer than a day renders as e.g.
        ``"25:00:00.000000"``.
        """
        micros = self._microseconds()
        sign = "-" if micros < 0 else ""

        secs, micros = divmod(abs(micros), 1_000_000)
        minutes, secs = divmod(secs, int(SECONDS_PER_MINUTE))
        hours, minutes = divmod(minutes, int(SECONDS_PER_HOUR / SECONDS_PER_MINUTE))
        return f"{sign}{hours}:{minutes:02d}:{secs:02d}.{micros:06d}"

    to_iso8601_string = to_duration_string

    def __add__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        return Time(self.sec + other.sec)

    def __sub__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        return Time(self.sec - other.sec)

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
        return Time(-self.sec)

    def __abs__(self):
        return self.abs()

    def __str__(self):
        """Return the number of seconds as a string."""
        return str(self.sec)
