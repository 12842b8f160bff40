"""
Tabulated optical constants n(E), k(E).
"""

import os

import numpy as np

from .interpolation import interpolate


DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


class NKTable(object):
    """
    Immutable table of optical constants versus photon energy.

    Parameters
    ----------
    energy : array_like
        Photon energy in eV, strictly ascending
    n : array_like
        Refractive index (real part)
    k : array_like
        Extinction coefficient (imaginary part of refractive index)
    name : str, optional
        Table name used in messages

    Examples
    --------
    >>> tab = NKTable.from_file('silver.dat')
    >>> tab.n_at(3.1), tab.k_at(3.1)
    """

    def __init__(self, energy, n, k, name=None):
        energy = np.array(energy, dtype=float)
        n = np.array(n, dtype=float)
        k = np.array(k, dtype=float)

        if energy.ndim != 1 or n.shape != energy.shape or k.shape != energy.shape:
            raise ValueError(
                f"energy, n and k must be 1-d arrays of equal length, "
                f"got shapes {energy.shape}, {n.shape}, {k.shape}"
            )
        if energy.size < 4:
            raise ValueError(
                f"Optical-constant table needs at least 4 rows, got {energy.size}"
            )
        if np.any(np.diff(energy) <= 0):
            raise ValueError("Photon energies must be strictly ascending and unique")

        for arr in (energy, n, k):
            arr.flags.writeable = False

        self._energy = energy
        self._n = n
        self._k = k
        self.name = name

    @classmethod
    def from_file(cls, filename, name=None):
        """
        Read table from file.

        File format: "energy(eV) n k" per line, lines starting with '%'
        or '#' are comments.  ``filename`` is either a path or the name
        of a file in the package data directory.
        """
        if os.path.exists(filename):
            filepath = filename
        else:
            filepath = os.path.join(DATA_DIR, filename)
            if not os.path.exists(filepath):
                raise FileNotFoundError(
                    f"Material data file not found: {filename}\n"
                    f"Tried: {filepath}"
                )

        data = []
        with open(filepath, 'r') as f:
            for line in f:
                line = line.strip()
                if line.startswith('%') or line.startswith('#') or not line:
                    continue
                try:
                    values = [float(x) for x in line.split()]
                except ValueError:
                    continue
                if len(values) >= 3:
                    data.append(values[:3])

        if not data:
            raise ValueError(f"No valid data found in {filepath}")

        data = np.array(data)
        if name is None:
            name = os.path.splitext(os.path.basename(filepath))[0]
        return cls(data[:, 0], data[:, 1], data[:, 2], name=name)

    @property
    def energy(self):
        return self._energy

    @property
    def n(self):
        return self._n

    @property
    def k(self):
        return self._k

    @property
    def ene_min(self):
        return float(self._energy[0])

    @property
    def ene_max(self):
        return float(self._energy[-1])

    def __len__(self):
        return self._energy.size

    def in_range(self, ene):
        """
        True where photon energy lies inside the tabulated grid.

        The range is half-open, [ene_min, ene_max).  At or beyond the last
        energy the bracket search finds no upper node and the interpolation
        falls back to the first window, so that point counts as outside.
        """
        ene = np.asarray(ene, dtype=float)
        return (ene >= self.ene_min) & (ene < self.ene_max)

    def n_at(self, ene):
        """Interpolated refractive index at photon energy ene (eV)."""
        return interpolate(self._energy, self._n, ene)

    def k_at(self, ene):
        """Interpolated extinction coefficient at photon energy ene (eV)."""
        return interpolate(self._energy, self._k, ene)

    def __repr__(self):
        return f"NKTable('{self.name}', {len(self)} rows)"

    def __str__(self):
        return (
            f"Optical constants {self.name}\n"
            f"Energy range: {self.ene_min:g} - {self.ene_max:g} eV"
        )
