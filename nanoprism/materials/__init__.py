"""
Material dielectric functions.

Classes:
- NKTable: Tabulated optical constants with four-point interpolation
- Metal: Optical constants plus free-electron parameters of a metal
- EpsConst: Constant dielectric function
- EpsTable: Bulk dielectric function of silver or gold
- EpsSizeDrude: Size-dependent dielectric function of silver or gold
"""

from .interpolation import interpolate
from .nk_table import NKTable
from .metals import (Metal, silver, gold, get_metal,
                     bulk_permittivity, size_corrected_permittivity)
from .eps_const import EpsConst
from .eps_table import EpsTable
from .eps_size import EpsSizeDrude

__all__ = [
    "interpolate",
    "NKTable",
    "Metal",
    "silver",
    "gold",
    "get_metal",
    "bulk_permittivity",
    "size_corrected_permittivity",
    "EpsConst",
    "EpsTable",
    "EpsSizeDrude",
]
