import numpy as np
import pytest

from fst_options.errors import ConfigurationError
from fst_options.fst import propagate

PSI = np.array([-0.05 + 0.0j, -0.3 + 1.2j, -2.0 - 0.7j])
SPECTRUM = np.array([1.0 + 0.0j, 2.0 - 1.0j, 0.5 + 0.5j])


def test_propagate_multiplies_each_bin_by_exp_dt_psi():
    spectrum = SPECTRUM.copy()
    propagate(spectrum, PSI, 0.5, 0.75)
    assert np.allclose(spectrum, SPECTRUM * np.exp(0.25 * PSI), rtol=1e-14, atol=0.0)
    # bin 0: 1 * exp(0.25 * -0.05)
    assert abs(spectrum[0] - 0.98757780049389) < 1e-12


def test_propagate_updates_in_place():
    spectrum = SPECTRUM.copy()
    out = propagate(spectrum, PSI, 0.0, 1.0)
    assert out is spectrum
    assert not np.allclose(spectrum, SPECTRUM)


def test_zero_interval_is_identity():
    spectrum = SPECTRUM.copy()
    propagate(spectrum, PSI, 0.3, 0.3)
    assert np.array_equal(spectrum, SPECTRUM)


def test_single_precision_spectrum_keeps_its_dtype():
    spectrum = SPECTRUM.astype(np.complex64)
    propagate(spectrum, PSI.astype(np.complex64), 0.0, 0.5)
    assert spectrum.dtype == np.complex64
    assert np.allclose(spectrum, SPECTRUM * np.exp(0.5 * PSI), rtol=1e-5)


def test_reversed_interval_is_rejected():
    spectrum = SPECTRUM.copy()
    with pytest.raises(ConfigurationError):
        propagate(spectrum, PSI, 0.75, 0.5)
    assert np.array_equal(spectrum, SPECTRUM)
