"""
Physical constants and unit conversions.
"""

import numpy as np

# Photon energy <-> vacuum wavelength, E [eV] = EV2NM / lambda [nm]
EV2NM = 1239.8  # eV * nm

# Reduced Planck constant (eV*s)
HBAR = 6.582e-16

# Length conversion (cm per nm)
NM2CM = 1.0e-7

# Area conversion, nm^2 -> cm^2
NM2_TO_CM2 = 1.0e-14

# Volume of a prism with equilateral triangle base is SQRT3_4 * L^2 * H
SQRT3_4 = 0.25 * np.sqrt(3.0)
