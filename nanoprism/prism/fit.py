"""
Empirical shape coefficients of the nanoprism dipole model.

Each coefficient is a power-law regression in the aspect ratios L/H, L/R
and H/R of a prism with equilateral triangle base of edge length L,
thickness H and corner radius R, obtained from fits to full-wave
simulations (Kondorskiy & Mekshun, J. Russ. Laser Res. 44, 627 (2023)).
"""

from collections import namedtuple

import numpy as np


FitCoefficients = namedtuple('FitCoefficients', ['beta', 'eps_c', 'a2', 'a4'])
FitCoefficients.__doc__ = """\
Shape coefficients of the polarizability.

beta  : effective volume fraction of the dipole
eps_c : permittivity shift of the quasistatic resonance
a2    : second-order (dynamic depolarization) coefficient
a4    : fourth-order coefficient
"""

# (prefactor, exponent) for L/H, L/R, H/R and a constant offset
_BETA = ((-0.649487, -1.27802), (1.87718, -0.928178), (0.0784606, -0.619604), 0.617065)
_EPS_C = ((-1.73983, 0.904851), (23.7005, -9.71985), (3.73666, -0.416187), -4.23387)
_A2 = ((1.35181, -0.556507), (1.13818, -0.483608), (-0.287856, -0.468685), -0.0564038)
_A4 = ((-2.58813, -0.447242), (-2.62882, -2.97322), (-0.254773, -0.125501), 0.702526)


def _powerlaw(coeffs, ratios):
    value = coeffs[-1]
    for (c, p), x in zip(coeffs[:-1], ratios):
        value = value + c * np.power(x, p)
    return value


def fit_coefficients(L, H, R):
    """
    Shape coefficients for a rounded-corner triangular prism.

    Parameters
    ----------
    L : float
        Edge length (nm)
    H : float
        Thickness (nm)
    R : float
        Corner radius of the triangle base (nm)

    Returns
    -------
    fit : FitCoefficients
        (beta, eps_c, a2, a4)
    """
    ratios = (L / H, L / R, H / R)
    return FitCoefficients(
        beta=_powerlaw(_BETA, ratios),
        eps_c=_powerlaw(_EPS_C, ratios),
        a2=_powerlaw(_A2, ratios),
        a4=_powerlaw(_A4, ratios),
    )
