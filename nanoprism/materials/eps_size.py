"""
Size-dependent dielectric function of a metal nanoparticle.

The bulk dielectric function is corrected for electron scattering at the
particle surface by replacing the bulk Drude damping gam_inf with

    gam_r = gam_inf + A * hbar * vF * (2 / D)

where D is the size parameter of the particle.
"""

import numpy as np

from .eps_table import EpsTable
from .metals import drude_correction


class EpsSizeDrude(EpsTable):
    """
    Bulk tabulated dielectric function plus size-dependent Drude term.

    Parameters
    ----------
    metal : str or Metal
        'silver' or 'gold', or a Metal descriptor
    diameter : float
        Size parameter D in nm
    strict : bool
        Raise OutOfRangeError instead of extrapolating outside the table

    Examples
    --------
    >>> from nanoprism.prism import effective_diameter
    >>> eps_ag = EpsSizeDrude('silver', effective_diameter(50, 20))
    >>> eps_val, k = eps_ag(400)
    """

    def __init__(self, metal, diameter, strict=False):
        super().__init__(metal, strict=strict)
        if not diameter > 0:
            raise ValueError(f"Size parameter must be positive, got {diameter}")
        self.diameter = float(diameter)

    def eps(self, enei):
        enei = np.asarray(enei, dtype=float)
        return super().eps(enei) + drude_correction(self.metal, enei, self.diameter)

    @property
    def gam_r(self):
        """Size-broadened damping energy (eV)."""
        return self.metal.gam_r(self.diameter)

    def __repr__(self):
        return f"EpsSizeDrude('{self.metal.name}', diameter={self.diameter:g})"

    def __str__(self):
        lo, hi = self.enei_range
        return (
            f"Size-dependent dielectric function of {self.metal.name}, "
            f"D = {self.diameter:g} nm\n"
            f"Wavelength range: {lo:.1f} - {hi:.1f} nm"
        )
