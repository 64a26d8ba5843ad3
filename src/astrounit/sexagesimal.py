"""Conversion of sexagesimal components to a single value.

Sexagesimal notation splits a value into a major part (degrees or hours), a minor
part (minutes) and a sub-unit (seconds), each a base-60 subdivision of the one
before. The functions here are agnostic to whether the major part is degrees or
hours; they only combine the components.

No range checking is done. Negative components, or minutes and seconds of 60 or
more, are combined arithmetically, so that for example
``from_sexa(" ", -22, 90, 0) == -20.5``. The sign is given separately and applies
to the combined sum rather than to any single component.
"""

from .types import SignLike


def sign_factor(neg: SignLike) -> int:
    """Return -1 if ``neg`` is the string "-", otherwise 1."""
    return -1 if neg == "-" else 1


def from_sexa_sec(neg: SignLike, d: int, m: int, s: float) -> float:
    """Combine sexagesimal components into a value in the units of ``s``.

    Parameters
    ----------
    neg
        Pass "-" to negate the result. Any other value, such as " ", "+" or 0,
        leaves the result non-negated.
    d
        The major component (degrees or hours).
    m
        The minor component, a sexagesimal part of ``d``.
    s
        The sub-unit component, a sexagesimal part of ``m``.
    """
    total = (d * 60 + m) * 60 + s
    return -total if neg == "-" else total


def from_sexa(neg: SignLike, d: int, m: int, s: float) -> float:
    """Combine sexagesimal components into a value in the units of ``d``.

    Otherwise identical to :func:`from_sexa_sec`.
    """
    return from_sexa_sec(neg, d, m, s) / 3600
