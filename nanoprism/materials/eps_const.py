"""
Constant dielectric function of the host medium.
"""

import numpy as np


class EpsConst(object):
    """
    Wavelength-independent dielectric constant.

    Parameters
    ----------
    eps : float or complex
        Dielectric constant, e.g. 1.0 for vacuum or 1.33**2 for water

    Examples
    --------
    >>> eps_water = EpsConst(1.33 ** 2)
    >>> eps_val, k = eps_water(500)
    """

    def __init__(self, eps):
        self.eps = eps

    def __call__(self, enei):
        """
        Dielectric constant and wavenumber in the medium.

        Parameters
        ----------
        enei : float or array_like
            Light wavelength in vacuum (nm)

        Returns
        -------
        eps : ndarray
            Dielectric constant broadcast to the shape of enei
        k : ndarray
            Wavenumber in medium (1/nm)
        """
        enei = np.asarray(enei, dtype=float)
        eps = np.full(enei.shape, self.eps, dtype=complex)
        return eps, self.wavenumber(enei)

    def wavenumber(self, enei):
        enei = np.asarray(enei, dtype=float)
        return 2 * np.pi / enei * np.sqrt(self.eps)

    def __repr__(self):
        return f"EpsConst(eps={self.eps})"

    def __str__(self):
        return f"Constant dielectric function: eps = {self.eps}"
