import os

import numpy as np
import pytest

from nanoprism.misc import prismoptions, getprismoptions
from nanoprism.prism import PrismDipole, dip_polarizability, effective_diameter
from nanoprism.materials import size_corrected_permittivity
from nanoprism.spectrum import (PrismSpectrum, SpectrumResult, wavelength_grid,
                                resonance_wavelength)
from nanoprism.utils import OutOfRangeError, GeometryError


# ============================================================================
# wavelength_grid
# ============================================================================

class TestWavelengthGrid(object):

    def test_reference_grid(self):
        enei = wavelength_grid(300.0, 800.0, 2.0)
        assert len(enei) == 251
        assert enei[0] == 300.0
        assert enei[-1] == 800.0

    def test_truncated_last_point(self):
        enei = wavelength_grid(300.0, 305.0, 2.0)
        np.testing.assert_allclose(enei, [300.0, 302.0, 304.0])

    def test_single_point(self):
        np.testing.assert_allclose(wavelength_grid(500.0, 500.0, 1.0), [500.0])

    @pytest.mark.parametrize("args", [(300.0, 800.0, 0.0), (300.0, 800.0, -1.0),
                                      (800.0, 300.0, 2.0)])
    def test_invalid(self, args):
        with pytest.raises(ValueError):
            wavelength_grid(*args)


# ============================================================================
# PrismSpectrum
# ============================================================================

class TestPrismSpectrum(object):

    @pytest.fixture(scope='class')
    def silver_result(self):
        return PrismSpectrum.from_options(prismoptions()).compute()

    def test_default_sweep(self, silver_result):
        assert isinstance(silver_result, SpectrumResult)
        assert len(silver_result) == 251
        assert silver_result.alpha.dtype == complex

    def test_consistent_with_core(self, silver_result):
        D = effective_diameter(50.0, 20.0)
        enei = silver_result.enei
        eps = size_corrected_permittivity('silver', enei, D)
        np.testing.assert_allclose(silver_result.eps, eps, rtol=1e-12)
        np.testing.assert_allclose(silver_result.alpha,
                                   dip_polarizability(enei, eps, 1.0, 50.0, 20.0, 2.0),
                                   rtol=1e-12)

    def test_reference_points(self, silver_result):
        i400 = int(np.argmin(np.abs(silver_result.enei - 400.0)))
        assert silver_result.ext[i400] == pytest.approx(7.70189e-12, rel=1e-5)
        assert silver_result.sca[i400] == pytest.approx(8.27932e-13, rel=1e-5)

    def test_absorption_non_negative(self, silver_result):
        assert np.all(silver_result.abs >= 0)
        np.testing.assert_allclose(silver_result.abs + silver_result.sca, silver_result.ext)

    def test_grid_resonance(self, silver_result):
        assert silver_result.resonance() == 458.0

    def test_gold_resonance(self):
        res = PrismSpectrum.from_options(prismoptions(material='gold')).compute()
        assert res.resonance() == 566.0

    def test_custom_wavelengths(self):
        spec = PrismSpectrum(PrismDipole('gold', (50.0, 20.0, 2.0)))
        res = spec.compute([450.0, 550.0, 650.0])
        assert len(res) == 3
        np.testing.assert_allclose(res.ext, spec.dipole.extinction(res.enei), rtol=1e-12)

    def test_default_grid(self):
        spec = PrismSpectrum(PrismDipole('gold', (50.0, 20.0, 2.0)))
        assert len(spec.enei) == 251

    def test_save_files(self, silver_result, tmp_path):
        files = silver_result.save(str(tmp_path), prefix='analytic_model')
        names = [os.path.basename(f) for f in files]
        assert names == [
            'analytic_model-polarizability_re.dat',
            'analytic_model-polarizability_im.dat',
            'analytic_model-scattering_cs.dat',
            'analytic_model-extinction_cs.dat',
        ]
        data = np.loadtxt(files[3])
        assert data.shape == (251, 2)
        np.testing.assert_allclose(data[:, 0], silver_result.enei)
        np.testing.assert_allclose(data[:, 1], silver_result.ext, rtol=1e-5)
        data = np.loadtxt(files[0])
        np.testing.assert_allclose(data[:, 1], silver_result.alpha.real, rtol=1e-5)

    def test_save_creates_directory(self, silver_result, tmp_path):
        out = os.path.join(str(tmp_path), 'nested', 'out')
        files = silver_result.save(out, prefix='ag')
        assert all(os.path.exists(f) for f in files)
        assert os.path.basename(files[1]) == 'ag-polarizability_im.dat'

    def test_plot(self, silver_result):
        matplotlib = pytest.importorskip('matplotlib')
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt

        ax = silver_result.plot(absorption=True)
        assert len(ax.get_lines()) == 3
        plt.close('all')

    def test_strict_out_of_range(self):
        spec = PrismSpectrum.from_options(prismoptions(strict=True, wl_min=150.0))
        with pytest.raises(OutOfRangeError):
            spec.compute()

    def test_extrapolation_warns(self):
        spec = PrismSpectrum.from_options(prismoptions(wl_min=150.0, wl_max=200.0))
        with pytest.warns(RuntimeWarning):
            res = spec.compute()
        assert np.all(np.isfinite(res.ext))

    def test_bad_geometry_option(self):
        with pytest.raises(GeometryError):
            PrismSpectrum.from_options(prismoptions(R=30.0))

    def test_unknown_option(self):
        with pytest.raises(KeyError):
            PrismSpectrum.from_options(prismoptions(thickness=20.0))

    def test_partial_options(self):
        spec = PrismSpectrum.from_options({'material': 'gold', 'wl_step': 10.0})
        assert spec.dipole.metal.name == 'gold'
        assert len(spec.enei) == 51


# ============================================================================
# resonance_wavelength
# ============================================================================

class TestResonance(object):

    def test_silver(self):
        lam = resonance_wavelength(PrismDipole('silver', (50.0, 20.0, 2.0)))
        assert 456.0 < lam < 460.0

    def test_gold(self):
        lam = resonance_wavelength(PrismDipole('gold', (50.0, 20.0, 2.0)))
        assert 564.0 < lam < 568.0

    def test_is_local_maximum(self):
        p = PrismDipole('silver', (50.0, 20.0, 2.0))
        lam = resonance_wavelength(p, bounds=(400.0, 600.0), step=5.0)
        ext = p.extinction(np.array([lam - 0.5, lam, lam + 0.5]))
        assert ext[1] >= ext[0]
        assert ext[1] >= ext[2]

    def test_redshift_with_host(self):
        vac = resonance_wavelength(PrismDipole('silver', (50.0, 20.0, 2.0)))
        water = resonance_wavelength(PrismDipole('silver', (50.0, 20.0, 2.0), epsout=1.77))
        assert water > vac


# ============================================================================
# Options
# ============================================================================

class TestOptions(object):

    def test_defaults(self):
        op = prismoptions()
        assert op['material'] == 'silver'
        assert (op['L'], op['H'], op['R']) == (50.0, 20.0, 2.0)
        assert (op['wl_min'], op['wl_max'], op['wl_step']) == (300.0, 800.0, 2.0)
        assert op['strict'] is False

    def test_override(self):
        op = prismoptions(material='gold', eps_h=1.77)
        assert op['material'] == 'gold'
        assert op['eps_h'] == 1.77

    def test_update_existing(self):
        op = prismoptions({'L': 80.0}, H=10.0)
        assert op == {'L': 80.0, 'H': 10.0}

    def test_getprismoptions_merge(self):
        op = getprismoptions(prismoptions(), 'eps_h', 2.0, R=1.0)
        assert op['eps_h'] == 2.0
        assert op['R'] == 1.0
        assert op['material'] == 'silver'

    def test_getprismoptions_substructure(self):
        op = getprismoptions(prismoptions(), {'au': {'material': 'gold', 'L': 60.0}}, ['au'])
        assert op['material'] == 'gold'
        assert op['L'] == 60.0
        assert 'au' not in op

    def test_unselected_variant_dropped(self):
        op = getprismoptions(prismoptions(), {'au': {'material': 'gold'}})
        assert op['material'] == 'silver'
        assert 'au' not in op

    def test_variant_order(self):
        variants = {'au': {'material': 'gold', 'L': 60.0}, 'thin': {'H': 8.0, 'L': 40.0}}
        op = getprismoptions(prismoptions(), variants, ['au', 'thin'], 'H', 10.0)
        assert (op['material'], op['L'], op['H']) == ('gold', 40.0, 10.0)

    def test_unknown_variant(self):
        with pytest.raises(KeyError):
            getprismoptions(prismoptions(), {'au': {'material': 'gold'}}, ['ag'])

    def test_spectrum_selects_variant(self):
        spec = PrismSpectrum.from_options({'au': {'material': 'gold'}}, ['au'])
        assert spec.dipole.metal.name == 'gold'
        assert len(spec.enei) == 251

    def test_spectrum_name_value_pairs(self):
        spec = PrismSpectrum.from_options('eps_h', 1.77, 'wl_step', 10.0, L=60.0)
        assert spec.dipole.eps_h == 1.77
        assert spec.dipole.geometry.L == 60.0
        assert len(spec.enei) == 51

    def test_spectrum_unknown_variant(self):
        with pytest.raises(KeyError):
            PrismSpectrum.from_options({'au': {'material': 'gold'}}, ['ag'])

    def test_spectrum_keyword_only(self):
        spec = PrismSpectrum.from_options(material='gold')
        assert spec.dipole.metal.name == 'gold'

    def test_dangling_name(self):
        with pytest.raises(ValueError):
            getprismoptions(prismoptions(), 'eps_h')

    def test_bad_argument(self):
        with pytest.raises(TypeError):
            getprismoptions(prismoptions(), 3.0)


# ============================================================================
# Demo script
# ============================================================================

class TestDemo(object):

    def test_writes_into_output_dir(self, tmp_path, monkeypatch):
        import importlib.util
        import matplotlib.pyplot as plt

        path = os.path.join(os.path.dirname(os.path.dirname(__file__)),
                            'examples', 'demo_prism_spectrum.py')
        spec = importlib.util.spec_from_file_location('demo_prism_spectrum', path)
        demo = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(demo)

        out = tmp_path / 'out'
        monkeypatch.chdir(tmp_path)
        res = demo.main(str(out), 'gold')
        plt.close('all')

        assert len(res) == 251
        assert (out / 'analytic_model-spectrum.png').exists()
        assert (out / 'analytic_model-extinction_cs.dat').exists()
        assert not (tmp_path / 'analytic_model-spectrum.png').exists()
