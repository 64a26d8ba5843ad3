"""Test the utils module."""

import math

import pytest
from astropy import units as un

from astrounit import pmod
from astrounit import utils


@pytest.mark.parametrize(
    ("x", "y", "expected"),
    [(5, 3, 2), (-5, 3, 1), (-2.5, 360, 357.5), (0, 360, 0), (720, 360, 0)],
)
def test_pmod(x, y, expected):
    assert pmod(x, y) == expected


@pytest.mark.parametrize("x", [-1e-17, -1e-300, -5e-324])
def test_pmod_tiny_negative_stays_below_divisor(x):
    assert pmod(x, 2 * math.pi) == 0.0
    assert pmod(x, 86400) == 0.0


def test_pmod_differs_from_fmod():
    assert math.fmod(-5, 3) == -2
    assert pmod(-5, 3) == 1


@pytest.mark.parametrize(
    ("x", "expected"),
    [(0.5, 1), (-0.5, -1), (1.5, 2), (2.5, 3), (-2.5, -3), (0.49, 0), (-0.2, 0)],
)
def test_round_half_away(x, expected):
    assert utils.round_half_away(x) == expected


def test_check_unit():
    q = 3 * un.deg
    assert utils.check_unit(q, un.rad, "q") is q

    with pytest.raises(TypeError, match="q must be a Quantity"):
        utils.check_unit(3, un.rad, "q")

    with pytest.raises(ValueError, match="q must have units compatible with rad"):
        utils.check_unit(3 * un.s, un.rad, "q")

    with pytest.raises(ValueError, match="q must be a scalar"):
        utils.check_unit([1, 2] * un.deg, un.rad, "q")

    with pytest.raises(ValueError, match="q must be a scalar"):
        utils.check_unit([90] * un.deg, un.rad, "q")
