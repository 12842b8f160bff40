"""
Demo: Silver Nanoprism Optical Spectrum

Polarizability, scattering and extinction cross sections of a triangular
silver prism with rounded corners (L = 50 nm, H = 20 nm, R = 2 nm) in
vacuum between 300 and 800 nm.  Writes the four spectra as two-column
text files and plots the cross sections.

Usage:
    python demo_prism_spectrum.py [output_dir] [silver|gold]
"""

import os
import sys

import matplotlib.pyplot as plt

from nanoprism.misc import prismoptions
from nanoprism.spectrum import PrismSpectrum, resonance_wavelength


def main(output_dir='.', material='silver'):
    op = prismoptions(material=material)

    spec = PrismSpectrum.from_options(op)
    geo = spec.dipole.geometry

    print("=" * 60)
    print("Nanoprism spectrum, {}".format(op['material']))
    print("L = {:g} nm, H = {:g} nm, R = {:g} nm, eps_h = {:g}".format(
        geo.L, geo.H, geo.R, op['eps_h']))
    print("Effective size to calculate size-dependent dielectric function "
          "= {:.4g} nm".format(geo.effective_diameter))
    print("=" * 60)

    res = spec.compute()
    files = res.save(output_dir, prefix=op['prefix'])
    for fname in files:
        print("  wrote {}".format(fname))

    lam_res = resonance_wavelength(spec.dipole, bounds=(op['wl_min'], op['wl_max']),
                                   step=op['wl_step'])
    print("\nResonance wavelength: {:.1f} nm".format(lam_res))
    print("Extinction at resonance: {:.3e} cm^2".format(
        float(spec.dipole.extinction(lam_res))))

    ax = res.plot(absorption=True)
    ax.axvline(lam_res, color='gray', lw=0.5)
    ax.set_title("{} nanoprism, L = {:g} nm, H = {:g} nm, R = {:g} nm".format(
        op['material'], geo.L, geo.H, geo.R))
    plt.tight_layout()
    plt.savefig(os.path.join(output_dir, "{}-spectrum.png".format(op['prefix'])), dpi=150)
    print("\nDone!")

    return res


if __name__ == '__main__':
    main(*sys.argv[1:3])
