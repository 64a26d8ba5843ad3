"""Useful constants."""

import math

SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0  # one day of Time is one circle of Angle
FULL_CIRCLE_RAD = 2 * math.pi
