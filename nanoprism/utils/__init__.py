"""
Shared constants, exceptions and warning helpers.
"""

from .constants import EV2NM, HBAR, NM2CM, NM2_TO_CM2, SQRT3_4
from .errors import OutOfRangeError, GeometryError
from .stack import find_stack_level

__all__ = [
    "EV2NM",
    "HBAR",
    "NM2CM",
    "NM2_TO_CM2",
    "SQRT3_4",
    "OutOfRangeError",
    "GeometryError",
    "find_stack_level",
]
