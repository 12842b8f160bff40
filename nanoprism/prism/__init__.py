"""
Analytical dipole model of a rounded-corner triangular nanoprism.

Provides:
- Prism geometry and volume-equivalent diameter (PrismGeometry, effective_diameter)
- Empirical shape coefficients (fit_coefficients)
- Dipole polarizability (dip_polarizability)
- Scattering, extinction and absorption cross sections
- Material + geometry + host medium bundle (PrismDipole)
"""

from .geometry import PrismGeometry, prism_volume, effective_diameter
from .fit import FitCoefficients, fit_coefficients
from .polarizability import dip_polarizability
from .cross_section import (wavenumber, scattering_cs, extinction_cs, absorption_cs,
                            scattering_from_polarizability,
                            extinction_from_polarizability)
from .prism_dipole import PrismDipole

__all__ = [
    "PrismGeometry",
    "prism_volume",
    "effective_diameter",
    "FitCoefficients",
    "fit_coefficients",
    "dip_polarizability",
    "wavenumber",
    "scattering_cs",
    "extinction_cs",
    "absorption_cs",
    "scattering_from_polarizability",
    "extinction_from_polarizability",
    "PrismDipole",
]
