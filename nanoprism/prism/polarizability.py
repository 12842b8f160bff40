"""
Dipole polarizability of a rounded-corner triangular nanoprism.

Modified long-wavelength approximation of the primary longitudinal
plasmon resonance:

                     V1 / (4 pi)
    alpha = -------------------------------------
            1/(eps_m/eps_h - 1) - 1/(eps_c - 1) - A

    A = a2 s^2 + i (4 pi^2 / 3) (V1 / L^3) s^3 + a4 s^4

with s = sqrt(eps_h) L / lambda, V1 = beta * sqrt(3)/4 L^2 H and the
shape coefficients (beta, eps_c, a2, a4) from fit_coefficients.
"""

import numpy as np

from .fit import fit_coefficients
from .geometry import prism_volume


def dip_polarizability(enei, eps_m, eps_h, L, H, R):
    """
    Dipole polarizability in nm^3.

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

    Returns
    -------
    alpha : complex or ndarray
        Polarizability, same shape as enei
    """
    enei = np.asarray(enei, dtype=float)
    eps_m = np.asarray(eps_m, dtype=complex)

    fit = fit_coefficients(L, H, R)
    s = np.sqrt(eps_h) * L / enei
    v1 = prism_volume(L, H) * fit.beta

    arc = (fit.a2 * s ** 2
           + 1j * 4.0 * np.pi ** 2 * v1 * s ** 3 / (3.0 * L ** 3)
           + fit.a4 * s ** 4)

    return (v1 / (4.0 * np.pi)
            / (1.0 / (eps_m / eps_h - 1.0) - 1.0 / (fit.eps_c - 1.0) - arc))
