"""
Material descriptors for silver and gold.

Each metal carries its own optical-constant table together with the
free-electron constants used in the size-dependent Drude correction.
"""

import warnings
from dataclasses import dataclass
from functools import lru_cache

import numpy as np

from .nk_table import NKTable
from ..utils.constants import EV2NM, HBAR, NM2CM
from ..utils.errors import OutOfRangeError
from ..utils.stack import find_stack_level


@dataclass(frozen=True)
class Metal:
    """
    Optical constants and free-electron parameters of a metal.

    Parameters
    ----------
    name : str
        Material name
    table : NKTable
        Tabulated n(E), k(E)
    vf : float
        Fermi velocity (cm/s)
    lam_inf : float
        Bulk mean free path of electrons (cm)
    wp : float
        Plasma energy (eV)
    A : float
        Empirical surface-scattering constant
    """
    name: str
    table: NKTable
    vf: float
    lam_inf: float
    wp: float
    A: float

    @property
    def gam_inf(self):
        """Bulk damping energy hbar * vF / lam_inf (eV)."""
        return HBAR * self.vf / self.lam_inf

    def gam_r(self, diameter):
        """Damping energy broadened by surface scattering (eV).

        Parameters
        ----------
        diameter : float
            Size parameter D in nm
        """
        return self.gam_inf + self.A * HBAR * self.vf * (2.0 / diameter) / NM2CM

    def check_range(self, ene, strict=False):
        """
        Range check of photon energies against the tabulated grid.

        The grid covers [ene_min, ene_max), see NKTable.in_range.
        With ``strict=False`` energies outside the grid are accepted (the
        interpolation extrapolates from the nearest window) and a
        RuntimeWarning is issued.  With ``strict=True`` OutOfRangeError
        is raised.
        """
        ene = np.asarray(ene, dtype=float)
        tab = self.table
        outside = ~tab.in_range(ene)
        if not np.any(outside):
            return
        if strict:
            raise OutOfRangeError(self.name, _describe(ene[outside]),
                                  tab.ene_min, tab.ene_max)
        warnings.warn(
            f"Photon energy {_describe(ene[outside])} eV outside tabulated range "
            f"{tab.ene_min:g} - {tab.ene_max:g} eV of {self.name}, extrapolating",
            RuntimeWarning, stacklevel=find_stack_level())

    def __repr__(self):
        return (f"Metal('{self.name}', vf={self.vf:g}, lam_inf={self.lam_inf:g}, "
                f"wp={self.wp}, A={self.A})")


def _describe(ene):
    ene = np.ravel(ene)
    if ene.size == 1:
        return f"{ene[0]:g}"
    return f"{ene.min():g} - {ene.max():g}"


@lru_cache(maxsize=None)
def silver():
    """Silver, Johnson & Christy (1972) optical constants."""
    return Metal(
        name='silver',
        table=NKTable.from_file('silver.dat'),
        vf=1.39e8,
        lam_inf=5.2e-6,
        wp=9.1,
        A=2.5,
    )


@lru_cache(maxsize=None)
def gold():
    """Gold, Olmon et al. (2012) optical constants."""
    return Metal(
        name='gold',
        table=NKTable.from_file('gold.dat'),
        vf=1.38e8,
        lam_inf=1.28e-6,
        wp=9.0,
        A=2.0,
    )


_METALS = {
    'silver': silver,
    'ag': silver,
    'gold': gold,
    'au': gold,
}


def get_metal(material):
    """
    Look up a metal by name.

    Parameters
    ----------
    material : str or Metal
        'silver' / 'Ag' or 'gold' / 'Au' (case-insensitive); a Metal
        instance is returned unchanged

    Returns
    -------
    metal : Metal
    """
    if isinstance(material, Metal):
        return material
    try:
        return _METALS[str(material).lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown material: {material!r}. Use 'silver' or 'gold'."
        ) from None


def bulk_permittivity(material, enei, strict=False):
    """
    Bulk dielectric function from tabulated optical constants.

    Parameters
    ----------
    material : str or Metal
        Metal
    enei : float or array_like
        Light wavelength in vacuum (nm)
    strict : bool
        Raise OutOfRangeError for photon energies outside the table

    Returns
    -------
    eps : complex or ndarray
        eps = (n^2 - k^2) + 2i n k
    """
    metal = get_metal(material)
    ene = EV2NM / np.asarray(enei, dtype=float)
    metal.check_range(ene, strict=strict)

    n = metal.table.n_at(ene)
    k = metal.table.k_at(ene)
    return (n * n - k * k) + 2j * n * k


def drude_correction(metal, enei, diameter):
    """
    Size-dependent Drude correction to the bulk dielectric function.

    wp^2 * (1 / (w^2 + i w gam_inf) - 1 / (w^2 + i w gam_r))
    """
    w = EV2NM / np.asarray(enei, dtype=float)
    gam_inf = metal.gam_inf
    gam_r = metal.gam_r(diameter)
    return metal.wp ** 2 * (1.0 / (w * w + 1j * w * gam_inf)
                            - 1.0 / (w * w + 1j * w * gam_r))


def size_corrected_permittivity(material, enei, diameter, strict=False):
    """
    Size-dependent dielectric function.

    Parameters
    ----------
    material : str or Metal
        Metal
    enei : float or array_like
        Light wavelength in vacuum (nm)
    diameter : float
        Size parameter D (nm), usually the effective diameter of the particle
    strict : bool
        Raise OutOfRangeError for photon energies outside the table

    Returns
    -------
    eps : complex or ndarray
    """
    metal = get_metal(material)
    return (bulk_permittivity(metal, enei, strict=strict)
            + drude_correction(metal, enei, diameter))
