"""Angle, hour-angle and time value types for astronomical computation."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = "unknown"
finally:
    del version, PackageNotFoundError

from .angle import Angle
from .duration import Time
from .hourangle import HourAngle
from .sexagesimal import from_sexa, from_sexa_sec
from .utils import pmod
