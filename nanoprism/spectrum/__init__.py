"""
Spectrum module for wavelength sweeps of the nanoprism model.

Provides:
- PrismSpectrum: Polarizability and cross sections over a wavelength grid
- SpectrumResult: Result arrays with text-file output and plotting
- resonance_wavelength: Refined wavelength of maximum extinction
"""

from .prism_spectrum import PrismSpectrum, SpectrumResult, wavelength_grid, resonance_wavelength

__all__ = ['PrismSpectrum', 'SpectrumResult', 'wavelength_grid', 'resonance_wavelength']
