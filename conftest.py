"""
Pytest configuration for nanoprism tests
"""

import numpy as np
import pytest


@pytest.fixture
def prism_geometry():
    """Edge length, thickness and corner radius (nm) of the reference prism"""
    return 50.0, 20.0, 2.0


@pytest.fixture
def enei_grid():
    """Wavelength grid of the reference spectrum (nm)"""
    return np.linspace(300.0, 800.0, 251)


def assert_allclose_complex(a, b, rtol=1e-10, atol=1e-12):
    """Assert two complex arrays are close"""
    np.testing.assert_allclose(np.real(a), np.real(b), rtol=rtol, atol=atol, err_msg="Real parts differ")
    np.testing.assert_allclose(np.imag(a), np.imag(b), rtol=rtol, atol=atol, err_msg="Imaginary parts differ")


@pytest.fixture
def allclose_complex():
    return assert_allclose_complex
