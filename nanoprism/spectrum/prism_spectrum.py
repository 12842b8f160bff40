"""
Wavelength sweeps of the nanoprism dipole model.
"""

import os

import numpy as np
from scipy.optimize import minimize_scalar

from ..prism.geometry import PrismGeometry
from ..prism.prism_dipole import PrismDipole
from ..prism.cross_section import (scattering_from_polarizability,
                                   extinction_from_polarizability)
from ..misc.options import prismoptions, getprismoptions


_OPTION_NAMES = frozenset(prismoptions())


def wavelength_grid(wl_min, wl_max, wl_step):
    """
    Equidistant wavelength grid wl_min, wl_min + wl_step, ... (nm).

    The number of points is int((wl_max - wl_min) / wl_step) + 1.
    """
    if wl_step <= 0:
        raise ValueError(f"Wavelength step must be positive, got {wl_step}")
    if wl_max < wl_min:
        raise ValueError(f"Empty wavelength range {wl_min} - {wl_max} nm")
    n = int((wl_max - wl_min) / wl_step) + 1
    return wl_min + np.arange(n) * wl_step


class SpectrumResult(object):
    """
    Polarizability and cross sections on a wavelength grid.

    Attributes
    ----------
    enei : ndarray
        Wavelengths (nm)
    eps : ndarray
        Dielectric function of the particle
    alpha : ndarray
        Dipole polarizability (nm^3)
    sca, ext, abs : ndarray
        Scattering, extinction and absorption cross sections (cm^2)
    """

    def __init__(self, enei, eps, alpha, sca, ext):
        self.enei = enei
        self.eps = eps
        self.alpha = alpha
        self.sca = sca
        self.ext = ext

    @property
    def abs(self):
        return self.ext - self.sca

    def resonance(self):
        """Wavelength of maximum extinction on the grid (nm)."""
        return float(self.enei[np.argmax(self.ext)])

    def save(self, directory='.', prefix='analytic_model'):
        """
        Write the four two-column text files of the spectrum.

        Files: <prefix>-polarizability_re.dat, <prefix>-polarizability_im.dat,
        <prefix>-scattering_cs.dat, <prefix>-extinction_cs.dat

        Returns
        -------
        files : list of str
            Paths of the written files
        """
        os.makedirs(directory, exist_ok=True)
        columns = [
            ('polarizability_re', np.real(self.alpha)),
            ('polarizability_im', np.imag(self.alpha)),
            ('scattering_cs', self.sca),
            ('extinction_cs', self.ext),
        ]
        files = []
        for tag, values in columns:
            fname = os.path.join(directory, f"{prefix}-{tag}.dat")
            np.savetxt(fname, np.column_stack([self.enei, values]), fmt='%g')
            files.append(fname)
        return files

    def plot(self, ax=None, absorption=False):
        """Plot extinction and scattering cross sections versus wavelength."""
        import matplotlib.pyplot as plt

        if ax is None:
            _, ax = plt.subplots()
        ax.plot(self.enei, self.ext, '-', label='extinction')
        ax.plot(self.enei, self.sca, '--', label='scattering')
        if absorption:
            ax.plot(self.enei, self.abs, ':', label='absorption')
        ax.set_xlabel('Wavelength (nm)')
        ax.set_ylabel(r'Cross section (cm$^2$)')
        ax.legend()
        return ax

    def __len__(self):
        return len(self.enei)

    def __repr__(self):
        return "SpectrumResult({} wavelengths, {:g} - {:g} nm)".format(
            len(self), self.enei[0], self.enei[-1])


class PrismSpectrum(object):
    """
    Spectrum of a nanoprism over a wavelength range.

    The particle dielectric function and the polarizability are
    evaluated once per wavelength, both cross sections derive from the
    same polarizability.

    Parameters
    ----------
    dipole : PrismDipole
        Particle, material and host medium

    Examples
    --------
    >>> spec = PrismSpectrum.from_options(prismoptions(material='gold'))
    >>> res = spec.compute()
    >>> res.save('results')
    """

    def __init__(self, dipole, enei=None):
        self.dipole = dipole
        if enei is None:
            op = prismoptions()
            enei = wavelength_grid(op['wl_min'], op['wl_max'], op['wl_step'])
        self.enei = np.asarray(enei, dtype=float)

    @classmethod
    def from_options(cls, *args, **kwargs):
        """
        Build spectrum from options (see prismoptions, getprismoptions).

        Arguments are passed to getprismoptions on top of the defaults,
        so variants can be selected here directly:

        >>> PrismSpectrum.from_options({'au': {'material': 'gold'}}, ['au'], eps_h=1.77)
        """
        op = getprismoptions(prismoptions(), *args, **kwargs)
        unknown = [key for key in op if key not in _OPTION_NAMES]
        if unknown:
            raise KeyError(f"Unknown prism option(s): {', '.join(sorted(unknown))}")

        geometry = PrismGeometry(op['L'], op['H'], op['R'])
        dipole = PrismDipole(op['material'], geometry, epsout=op['eps_h'],
                             size_correction=op['size_correction'],
                             strict=op['strict'])
        return cls(dipole, wavelength_grid(op['wl_min'], op['wl_max'], op['wl_step']))

    def compute(self, enei=None):
        """
        Evaluate polarizability and cross sections.

        Parameters
        ----------
        enei : array_like, optional
            Wavelengths (nm), defaults to the grid given at construction

        Returns
        -------
        result : SpectrumResult
        """
        enei = self.enei if enei is None else np.asarray(enei, dtype=float)
        eps_h = self.dipole.eps_h

        eps = self.dipole.eps(enei)
        alpha = self.dipole.polarizability(enei, eps=eps)
        sca = scattering_from_polarizability(alpha, enei, eps_h)
        ext = extinction_from_polarizability(alpha, enei, eps_h)
        return SpectrumResult(enei, eps, alpha, sca, ext)

    def __repr__(self):
        return "PrismSpectrum({!r}, {} wavelengths)".format(self.dipole, len(self.enei))


def resonance_wavelength(dipole, bounds=(300.0, 800.0), step=2.0, xatol=1e-3):
    """
    Wavelength of maximum extinction (nm).

    The maximum is bracketed on a grid of spacing ``step`` and refined
    with a bounded scalar minimization of the negative extinction.

    Parameters
    ----------
    dipole : PrismDipole
        Particle
    bounds : tuple
        Search range (nm)
    step : float
        Spacing of the bracketing grid (nm)
    xatol : float
        Absolute wavelength tolerance of the refinement (nm)

    Returns
    -------
    enei : float
        Resonance wavelength
    """
    lo, hi = bounds
    grid = wavelength_grid(lo, hi, step)
    imax = int(np.argmax(dipole.extinction(grid)))

    a = grid[max(imax - 1, 0)]
    b = grid[min(imax + 1, len(grid) - 1)]
    if a == b:
        return float(a)

    res = minimize_scalar(lambda x: -float(dipole.extinction(x)),
                          bounds=(a, b), method='bounded',
                          options={'xatol': xatol})
    return float(res.x)
