"""Top-level configuration for tests."""

import pytest

from astrounit import Angle, HourAngle, Time


@pytest.fixture()
def right_angle() -> Angle:
    return Angle.from_deg(90)


@pytest.fixture()
def six_hours() -> HourAngle:
    return HourAngle.from_hour(6)


@pytest.fixture()
def one_day() -> Time:
    return Time.from_day(1)
