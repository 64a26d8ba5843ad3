"""Various types used throughout the package."""

from typing import Any

import astropy.units as un

AngleQuantity = un.Quantity["angle"]
TimeQuantity = un.Quantity["time"]

# Only the string "-" negates; anything else (" ", "+", 0, None) does not.
SignLike = Any
