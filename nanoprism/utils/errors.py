"""
Exceptions raised by the nanoprism model.
"""


class OutOfRangeError(ValueError):
    """Photon energy outside the tabulated optical-constant grid."""

    def __init__(self, name, ene, ene_min, ene_max):
        self.name = name
        self.ene_min = ene_min
        self.ene_max = ene_max
        super().__init__(
            f"Argument of dielectric function of {name} is out of range. "
            f"Valid range: {ene_min:g} - {ene_max:g} eV, "
            f"requested: {ene}")


class GeometryError(ValueError):
    """Prism dimensions outside the validity of the model."""
