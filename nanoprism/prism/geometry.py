"""
Rounded-corner triangular nanoprism.
"""

import numpy as np

from .fit import fit_coefficients
from ..utils.constants import SQRT3_4
from ..utils.errors import GeometryError


def prism_volume(L, H):
    """Volume sqrt(3)/4 * L^2 * H of a prism with equilateral triangle base (nm^3)."""
    return SQRT3_4 * L * L * H


def effective_diameter(L, H):
    """
    Diameter of a sphere with the same volume as the prism.

    D = 2 * (3 sqrt(3) L^2 H / (16 pi))^(1/3)

    Parameters
    ----------
    L : float
        Edge length (nm)
    H : float
        Thickness (nm)

    Returns
    -------
    D : float
        Effective diameter (nm)
    """
    return 2.0 * np.cbrt(3.0 * np.sqrt(3.0) * L * L * H / (16.0 * np.pi))


class PrismGeometry(object):
    """
    Triangular prism with rounded corners.

    Parameters
    ----------
    L : float
        Edge length of the equilateral triangle base (nm)
    H : float
        Thickness (nm)
    R : float
        Corner radius of the triangle base (nm)

    Notes
    -----
    The shape coefficients are regressions over prisms with corner
    radius small compared with both edge length and thickness, so
    R must be smaller than L / 2 and H / 2.

    Examples
    --------
    >>> geo = PrismGeometry(50, 20, 2)
    >>> geo.effective_diameter
    """

    def __init__(self, L, H, R):
        self.L = _positive('L', L)
        self.H = _positive('H', H)
        self.R = _positive('R', R)

        if self.R >= 0.5 * self.L or self.R >= 0.5 * self.H:
            raise GeometryError(
                f"Corner radius R = {self.R:g} nm too large for edge length "
                f"L = {self.L:g} nm and thickness H = {self.H:g} nm"
            )

    @property
    def volume(self):
        return prism_volume(self.L, self.H)

    @property
    def effective_diameter(self):
        return effective_diameter(self.L, self.H)

    @property
    def ratios(self):
        """Aspect ratios (L/H, L/R, H/R)."""
        return self.L / self.H, self.L / self.R, self.H / self.R

    def fit(self):
        return fit_coefficients(self.L, self.H, self.R)

    def __iter__(self):
        return iter((self.L, self.H, self.R))

    def __eq__(self, other):
        if not isinstance(other, PrismGeometry):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return f"PrismGeometry(L={self.L:g}, H={self.H:g}, R={self.R:g})"


def _positive(name, value):
    value = float(value)
    if not np.isfinite(value) or value <= 0:
        raise GeometryError(f"{name} must be a positive length in nm, got {value}")
    return value
