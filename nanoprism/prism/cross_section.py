"""
Scattering and extinction cross sections of the nanoprism dipole.

Cross sections are returned in cm^2; the polarizability is in nm^3 and
the wavenumber in 1/nm.
"""

import numpy as np

from .polarizability import dip_polarizability
from ..utils.constants import NM2_TO_CM2


def wavenumber(enei, eps_h):
    """Wavenumber in the host medium, 2 pi sqrt(eps_h) / lambda (1/nm)."""
    return 2.0 * np.pi * np.sqrt(eps_h) / np.asarray(enei, dtype=float)


def scattering_from_polarizability(alpha, enei, eps_h):
    """Scattering cross section 8 pi / 3 k^4 |alpha|^2 (cm^2)."""
    k = wavenumber(enei, eps_h)
    return 8.0 * np.pi / 3.0 * k ** 4 * np.abs(alpha) ** 2 * NM2_TO_CM2


def extinction_from_polarizability(alpha, enei, eps_h):
    """Extinction cross section 4 pi k Im(alpha) (cm^2)."""
    k = wavenumber(enei, eps_h)
    return 4.0 * np.pi * k * np.imag(alpha) * NM2_TO_CM2


def scattering_cs(enei, eps_m, eps_h, L, H, R):
    """
    Scattering cross section in cm^2.

    Parameters
    ----------
    enei : float or array_like
        Light wavelength in vacuum (nm)
    eps_m : complex or array_like
        Dielectric function of the particle at enei
    eps_h : float
        Dielectric constant of the host medium
    L, H, R : float
        Edge length, thickness and corner radius (nm)
    """
    alpha = dip_polarizability(enei, eps_m, eps_h, L, H, R)
    return scattering_from_polarizability(alpha, enei, eps_h)


def extinction_cs(enei, eps_m, eps_h, L, H, R):
    """
    Extinction cross section in cm^2.

    Same arguments as scattering_cs.
    """
    alpha = dip_polarizability(enei, eps_m, eps_h, L, H, R)
    return extinction_from_polarizability(alpha, enei, eps_h)


def absorption_cs(enei, eps_m, eps_h, L, H, R):
    """Absorption cross section, extinction minus scattering (cm^2)."""
    alpha = dip_polarizability(enei, eps_m, eps_h, L, H, R)
    return (extinction_from_polarizability(alpha, enei, eps_h)
            - scattering_from_polarizability(alpha, enei, eps_h))
