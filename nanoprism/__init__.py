"""
nanoprism - Analytical optical model of metal nanoprisms

Polarizability, extinction and scattering cross sections of the primary
longitudinal plasmon resonance of a triangular silver or gold nanoprism
with rounded corners, including the size-dependent dielectric function.

Reference: A.D. Kondorskiy, A.V. Mekshun, "Effect of Geometric Parameters
of Metallic Nanoprisms on the Plasmonic Resonance Wavelength",
J. Russ. Laser Res. 44, 627-637 (2023).

Main modules:
- materials: Optical constants and dielectric functions (EpsTable, EpsSizeDrude)
- prism: Geometry, shape coefficients, polarizability, cross sections
- spectrum: Wavelength sweeps and resonance search
- misc: Option dictionaries
"""

__version__ = "0.1.0"

from .materials import (EpsConst, EpsTable, EpsSizeDrude, NKTable, Metal,
                        silver, gold, get_metal, interpolate,
                        bulk_permittivity, size_corrected_permittivity)
from .prism import (PrismGeometry, PrismDipole, effective_diameter, fit_coefficients,
                    dip_polarizability, scattering_cs, extinction_cs, absorption_cs)
from .spectrum import PrismSpectrum, SpectrumResult, wavelength_grid, resonance_wavelength
from .misc import prismoptions, getprismoptions
from .utils import EV2NM, OutOfRangeError, GeometryError

__all__ = [
    "EpsConst",
    "EpsTable",
    "EpsSizeDrude",
    "NKTable",
    "Metal",
    "silver",
    "gold",
    "get_metal",
    "interpolate",
    "bulk_permittivity",
    "size_corrected_permittivity",
    "PrismGeometry",
    "PrismDipole",
    "effective_diameter",
    "fit_coefficients",
    "dip_polarizability",
    "scattering_cs",
    "extinction_cs",
    "absorption_cs",
    "PrismSpectrum",
    "SpectrumResult",
    "wavelength_grid",
    "resonance_wavelength",
    "prismoptions",
    "getprismoptions",
    "EV2NM",
    "OutOfRangeError",
    "GeometryError",
]
