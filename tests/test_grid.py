import numpy as np
import pytest

from fst_options.errors import ConfigurationError
from fst_options.grid import build_grid, half_width


@pytest.mark.parametrize("N", [2 ** n for n in range(1, 17)])
def test_grid_spans_domain_and_spot_sits_on_a_node(N):
    g = build_grid(N, 0.2, 1.0, 0.05)
    assert np.isclose(g.x_min + (N - 1) * g.delta_x, g.x_max, rtol=0.0, atol=1e-12)
    assert np.isclose(g.delta_x, (g.x_max - g.x_min) / (N - 1), rtol=1e-12)
    assert np.isclose(g.delta_frequency, (N - 1) / ((g.x_max - g.x_min) * N), rtol=1e-12)
    # delta_frequency is the DFT frequency spacing 1 / (N dx)
    assert np.isclose(g.delta_frequency, 1.0 / (N * g.delta_x), rtol=1e-12)
    assert g.spot_index == N // 2
    assert g.log_prices()[g.spot_index] == 0.0
    assert g.n_frequencies == N // 2 + 1


def test_half_width_rule():
    # 10 standard deviations plus the drift, floored at min_half_width
    assert np.isclose(half_width(0.2, 1.0, 0.05), 10 * 0.2 + 0.05)
    assert half_width(0.0, 0.0, 0.0) == 1.0
    assert np.isclose(half_width(0.2, 1.0, 0.05, 0.05, width=5.0), 1.0)
    # a model-supplied variance rate takes precedence over the volatility
    assert np.isclose(half_width(0.2, 4.0, 0.0, variance_rate=0.09), 10 * 0.3 * 2.0)


@pytest.mark.parametrize("N", [0, 1, 3, 100, 1000])
def test_grid_rejects_bad_resolution(N):
    with pytest.raises(ConfigurationError):
        build_grid(N, 0.2, 1.0, 0.05)


def test_grid_rejects_negative_inputs():
    with pytest.raises(ConfigurationError):
        build_grid(64, -0.1, 1.0, 0.05)
    with pytest.raises(ConfigurationError):
        build_grid(64, 0.1, -1.0, 0.05)
