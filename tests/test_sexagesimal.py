"""Test the sexagesimal module."""

import pytest

from astrounit import from_sexa, from_sexa_sec
from astrounit.sexagesimal import sign_factor


def test_typical_usage():
    assert from_sexa("-", 20, 30, 0) == -20.5


def test_sign_on_degrees_is_not_negation():
    # The minus sign on d only negates d, not the whole value.
    assert from_sexa(" ", -20, 30, 0) == -19.5


@pytest.mark.parametrize(
    ("neg", "d", "m", "s"),
    [
        (" ", -20, -30, 0),
        (" ", -21, 30, 0),
        (" ", -22, 90, 0),
        ("-", 22, -90, 0),
        ("-", 0, 1230, 0),
        ("-", 20, 0, 1800),
    ],
)
def test_out_of_range_components_combine(neg, d, m, s):
    assert from_sexa(neg, d, m, s) == -20.5


@pytest.mark.parametrize("neg", [" ", "+", 0, None, "", "--"])
def test_non_negating_signs(neg):
    assert from_sexa_sec(neg, 1, 0, 0) == 3600
    assert sign_factor(neg) == 1


def test_from_sexa_sec():
    assert from_sexa_sec(" ", 1, 0, 0) == 3600
    assert from_sexa_sec("-", 0, 1, 23) == -83
    assert from_sexa_sec(" ", 0, 0, 45.5) == 45.5


def test_from_sexa_is_sec_over_3600():
    assert from_sexa(" ", 12, 34, 45.6) == from_sexa_sec(" ", 12, 34, 45.6) / 3600
