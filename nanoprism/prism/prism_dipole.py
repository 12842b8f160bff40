"""
Optical response of a metal nanoprism in the dipole approximation.
"""

import warnings

import numpy as np

from .geometry import PrismGeometry
from .polarizability import dip_polarizability
from .cross_section import (scattering_from_polarizability,
                            extinction_from_polarizability)
from ..materials.eps_const import EpsConst
from ..materials.eps_table import EpsTable
from ..materials.eps_size import EpsSizeDrude
from ..utils.stack import find_stack_level


def _get_eps_value(eps_func, enei):
    """Dielectric function value from eps_func(enei) -> eps or (eps, k)."""
    result = eps_func(enei)
    if isinstance(result, tuple):
        return result[0]
    return result


class PrismDipole(object):
    """
    Silver or gold nanoprism embedded in a homogeneous host medium.

    Parameters
    ----------
    metal : str or Metal
        Particle material, 'silver' or 'gold'
    geometry : PrismGeometry or tuple
        Prism geometry, or (L, H, R) in nm
    epsout : EpsConst or float, optional
        Dielectric function of the host medium (default vacuum), with
        positive real part
    size_correction : bool
        Use the size-dependent dielectric function (default True)
    diameter : float, optional
        Size parameter for the size correction, defaults to the
        effective diameter of the prism; not allowed without size_correction
    strict : bool
        Raise OutOfRangeError for wavelengths outside the optical-constant
        table instead of extrapolating

    Examples
    --------
    >>> p = PrismDipole('silver', (50, 20, 2))
    >>> enei = np.linspace(300, 800, 251)
    >>> ext = p.extinction(enei)
    """

    def __init__(self, metal, geometry, epsout=1.0, size_correction=True,
                 diameter=None, strict=False):
        if not isinstance(geometry, PrismGeometry):
            geometry = PrismGeometry(*geometry)
        self.geometry = geometry

        if not isinstance(epsout, EpsConst):
            epsout = EpsConst(epsout)
        if not complex(epsout.eps).real > 0:
            raise ValueError(f"Host dielectric constant must be positive, got {epsout.eps}")
        self.epsout = epsout

        if size_correction:
            if diameter is None:
                diameter = geometry.effective_diameter
            self.epsin = EpsSizeDrude(metal, diameter, strict=strict)
        elif diameter is not None:
            raise ValueError("diameter only applies with size_correction=True")
        else:
            self.epsin = EpsTable(metal, strict=strict)

    @property
    def metal(self):
        return self.epsin.metal

    @property
    def eps_h(self):
        """Real dielectric constant of the host medium."""
        eps_h = complex(self.epsout.eps)
        if eps_h.imag != 0:
            warnings.warn('Prism embedded in medium with complex dielectric function, '
                          'using real part', stacklevel=find_stack_level())
        return eps_h.real

    def eps(self, enei):
        """Dielectric function of the particle."""
        return _get_eps_value(self.epsin, enei)

    def polarizability(self, enei, eps=None):
        """
        Dipole polarizability (nm^3).

        Parameters
        ----------
        enei : float or array_like
            Light wavelength in vacuum (nm)
        eps : complex or array_like, optional
            Particle dielectric function at enei, computed when omitted
        """
        enei = np.asarray(enei, dtype=float)
        if eps is None:
            eps = self.eps(enei)
        L, H, R = self.geometry
        return dip_polarizability(enei, eps, self.eps_h, L, H, R)

    def scattering(self, enei):
        """Scattering cross section (cm^2)."""
        return scattering_from_polarizability(
            self.polarizability(enei), enei, self.eps_h)

    def extinction(self, enei):
        """Extinction cross section (cm^2)."""
        return extinction_from_polarizability(
            self.polarizability(enei), enei, self.eps_h)

    def absorption(self, enei):
        """Absorption cross section (cm^2)."""
        alpha = self.polarizability(enei)
        eps_h = self.eps_h
        return (extinction_from_polarizability(alpha, enei, eps_h)
                - scattering_from_polarizability(alpha, enei, eps_h))

    def __repr__(self):
        return "PrismDipole({!r}, {!r}, {!r})".format(
            self.metal.name, self.geometry, self.epsout)
