"""
Bulk dielectric function of a metal from tabulated optical constants.
"""

import numpy as np

from .metals import get_metal, bulk_permittivity
from ..utils.constants import EV2NM


class EpsTable(object):
    """
    Bulk dielectric function eps = (n + ik)^2 of silver or gold.

    Parameters
    ----------
    metal : str or Metal
        'silver' or 'gold', or a Metal descriptor
    strict : bool
        Raise OutOfRangeError instead of extrapolating outside the table

    Examples
    --------
    >>> eps_ag = EpsTable('silver')
    >>> eps_val, k = eps_ag(np.linspace(300, 800, 251))
    """

    def __init__(self, metal, strict=False):
        self.metal = get_metal(metal)
        self.strict = strict

    def __call__(self, enei):
        """
        Interpolated dielectric function and wavenumber.

        Parameters
        ----------
        enei : float or array_like
            Light wavelength in vacuum (nm)

        Returns
        -------
        eps : complex or ndarray
            Dielectric function
        k : complex or ndarray
            Wavenumber in medium (1/nm)
        """
        enei = np.asarray(enei, dtype=float)
        eps = self.eps(enei)
        return eps, 2 * np.pi / enei * np.sqrt(eps)

    def eps(self, enei):
        return bulk_permittivity(self.metal, enei, strict=self.strict)

    def refractive_index(self, enei):
        """Complex refractive index n + ik."""
        ene = EV2NM / np.asarray(enei, dtype=float)
        self.metal.check_range(ene, strict=self.strict)
        tab = self.metal.table
        return tab.n_at(ene) + 1j * tab.k_at(ene)

    @property
    def enei_range(self):
        """Wavelength range (nm) covered by the table, shortest wavelength excluded."""
        tab = self.metal.table
        return EV2NM / tab.ene_max, EV2NM / tab.ene_min

    def __repr__(self):
        return f"EpsTable('{self.metal.name}')"

    def __str__(self):
        lo, hi = self.enei_range
        return (
            f"Tabulated dielectric function of {self.metal.name}\n"
            f"Wavelength range: {lo:.1f} - {hi:.1f} nm"
        )
